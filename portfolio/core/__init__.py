"""Shared shell: theme, navigation, reveal-on-view and page layout."""
