"""Request and response models for model cache and device introspection."""

from __future__ import annotations

from marqo_client.core.fields import QueryParam, RequestModel, ResponseModel

MODEL_DEVICES = ("cpu", "cuda")


class Model(ResponseModel):
    """A model loaded in the server's cache."""

    model_name: str
    model_device: str


class GetModelsResponse(ResponseModel):
    models: list[Model]


class EjectModelRequest(RequestModel):
    """Request to remove a model from the server's cache.

    Example:
        >>> EjectModelRequest(model_name="hf/all_datasets_v4_MiniLM-L6", model_device="cpu")
    """

    model_name: str | None = QueryParam(required=True)
    model_device: str | None = QueryParam(required=True, choices=MODEL_DEVICES)


class GetCPUInfoResponse(ResponseModel):
    cpu_usage_percent: str
    memory_used_percent: str
    memory_used_gb: str


class CUDADevice(ResponseModel):
    device_name: str
    memory_used: str
    total_memory: str


class GetCUDAInfoResponse(ResponseModel):
    cuda_devices: list[CUDADevice]
