"""
create pvc 的参数预检
只检查原始字符串的形状，容量的解析和比较交给 builder
"""

from kcreate.apiObject.accessMode import AccessMode
from kcreate.util.errors import ValidationError


def validate(request):
    """按顺序检查，遇到第一个错误就抛出 ValidationError"""
    if not request.name:
        raise ValidationError("name must be specified")
    if not request.storage_request:
        raise ValidationError("storage-request must be specified")

    for mode in request.split_access_modes():
        if not AccessMode.is_valid(mode):
            raise ValidationError(f"provided access mode {mode} is invalid")
