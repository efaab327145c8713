def pytest_addoption(parser):
    parser.addoption("--backend", action="store", default=None,
                     choices=("memory", "file"),
                     help="only run slot backend tests against this backend")
