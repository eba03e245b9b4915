"""Single-page personal portfolio built with Reflex."""
