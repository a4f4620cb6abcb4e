pytest_plugins = ["logadmin.testing.conftest"]
