"""Price provider registry."""

from __future__ import annotations

from eoddash.config import ProviderType
from eoddash.providers.base import BasePriceProvider

# Lazy registry: classes are imported on demand so the mock provider
# works without an HTTP stack configured.
PROVIDER_CLASSES: dict[ProviderType, str] = {
    ProviderType.MARKETSTACK: "eoddash.providers.marketstack.MarketstackProvider",
    ProviderType.MOCK: "eoddash.providers.mock.MockProvider",
}


def create_provider(
    provider_type: ProviderType,
    **kwargs,
) -> BasePriceProvider:
    """Instantiate a provider by type, forwarding kwargs to its constructor."""
    import importlib

    dotted = PROVIDER_CLASSES[provider_type]
    module_path, cls_name = dotted.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, cls_name)
    return cls(**kwargs)


__all__ = ["BasePriceProvider", "PROVIDER_CLASSES", "create_provider"]
