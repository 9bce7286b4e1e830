from tests.test_utils.factories.config import QueryConfigFactory, UrlConfigFactory

__all__ = ["QueryConfigFactory", "UrlConfigFactory"]
