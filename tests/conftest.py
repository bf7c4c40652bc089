import django
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O")
    config.addinivalue_line("markers", "integration: tests running Django commands")
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["graph_augment"],
            GRAPH_AUGMENT={},
        )
        django.setup()
