"""
根据 ClaimRequest 构造 PersistentVolumeClaim
"""

from kcreate.apiObject.accessMode import AccessMode
from kcreate.apiObject.persistentVolumeClaim import PersistentVolumeClaim
from kcreate.resource.quantity import parse_quantity
from kcreate.util.errors import BuildError, ParseError

LIMIT_NOT_GREATER = "resource limit is the same/less than the resource request"


def build(request, enforce_namespace=False):
    """
    构造 PVC 对象，失败时抛出 BuildError，不会返回半成品

    Args:
        request: ClaimRequest
        enforce_namespace: 为 True 时才写入 request.namespace

    Returns:
        PersistentVolumeClaim
    """
    namespace = ""
    if enforce_namespace:
        namespace = request.namespace or ""

    storage_request, storage_limit = _parse_resources(request)

    access_modes = ()
    if request.access_modes:
        access_modes = tuple(_parse_access_modes(request))

    storage_class_name = None
    if request.storage_class_name:
        storage_class_name = request.storage_class_name

    return PersistentVolumeClaim(
        name=request.name,
        namespace=namespace,
        storage_request=storage_request,
        storage_limit=storage_limit,
        access_modes=access_modes,
        storage_class_name=storage_class_name,
    )


def _parse_quantity(raw):
    try:
        return parse_quantity(raw)
    except ParseError as e:
        raise BuildError(str(e)) from e


def _parse_resources(request):
    """返回 (request 容量, limit 容量或 None)"""
    storage_request = _parse_quantity(request.storage_request)

    storage_limit = None
    if request.storage_limit:
        storage_limit = _parse_quantity(request.storage_limit)
        if storage_limit.cmp(storage_request) < 1:
            raise BuildError(LIMIT_NOT_GREATER)
    return storage_request, storage_limit


def _parse_access_modes(request):
    # 合法性由 validator 负责，这里遇到未知值原样保留
    for mode in request.split_access_modes():
        if AccessMode.is_valid(mode):
            yield AccessMode(mode)
        else:
            yield mode
