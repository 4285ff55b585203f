pytest_plugins = ["taskquery.testing.fixtures"]
