import rxconfig


def test_config_names_the_app_package():
    assert isinstance(rxconfig.config, rxconfig.PortfolioConfig)
    assert rxconfig.config.app_name == "portfolio"
