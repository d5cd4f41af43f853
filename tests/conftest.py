from __future__ import annotations

import pytest

from ingress.ipwhitelist import WHITELIST
from ingress.resource import Ingress


@pytest.fixture
def ing() -> Ingress:
    return Ingress(name="foo", namespace="default", annotations={})


@pytest.fixture
def manifest() -> dict:
    return {
        "apiVersion": "extensions/v1beta1",
        "kind": "Ingress",
        "metadata": {
            "name": "foo",
            "namespace": "web",
            "annotations": {WHITELIST: "2.2.2.2/32,1.1.1.1/32,3.3.3.0/24"},
        },
        "spec": {"backend": {"serviceName": "default-backend", "servicePort": 80}},
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (
        "INGRESS_LOG_PATH",
        "INGRESS_LOG_LEVEL",
        "INGRESS_STRICT",
        "INGRESS_DEFAULT_WHITELIST",
    ):
        monkeypatch.delenv(var, raising=False)
