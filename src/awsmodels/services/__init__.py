"""
Registry of service models.

Each service lives in a subpackage exposing ``SERVICE``; subpackages are
imported on first use.
"""

import importlib
import threading

from awsmodels.log import get_logger
from awsmodels.service import ServiceModel

logger = get_logger(__name__)

SERVICE_NAMES: tuple[str, ...] = (
    "cloudsearchdomain",
    "codedeploy",
    "codepipeline",
    "config",
    "devicefarm",
    "ecs",
    "firehose",
    "rds",
    "s3",
    "storagegateway",
)

_services: dict[str, ServiceModel] = {}
_services_lock = threading.Lock()


def get_service(name: str) -> ServiceModel:
    """
    Return the model of a service, importing its package on first use.

    Raises:
        KeyError: If no service is registered under ``name``
    """
    if (service := _services.get(name)) is not None:
        return service
    if name not in SERVICE_NAMES:
        raise KeyError(f"Unknown service '{name}', expected one of: {', '.join(SERVICE_NAMES)}")
    with _services_lock:
        if name not in _services:
            module = importlib.import_module(f"{__name__}.{name}")
            _services[name] = module.SERVICE
            logger.debug("Loaded service model %s", name)
        return _services[name]


def available_services() -> tuple[str, ...]:
    return SERVICE_NAMES
