pytest_plugins = ["cdn_keys.testing.fixtures"]
