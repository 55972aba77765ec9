from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClaimRequest:
    """
    create pvc 命令的原始输入（未校验、未解析）
    只负责把命令行参数搬运给 validator 和 builder
    """

    name: str = ""
    namespace: Optional[str] = None
    storage_request: str = ""  # 如 "5Gi"，必填
    storage_limit: str = ""  # 可选
    access_modes: str = ""  # 逗号分隔，如 "ReadWriteOnce,ReadOnlyMany"
    storage_class_name: str = ""

    @classmethod
    def from_args(cls, name, args, namespace=None):
        """从 argparse 解析结果构造"""
        return cls(
            name=name or "",
            namespace=namespace,
            storage_request=getattr(args, "storage_request", None) or "",
            storage_limit=getattr(args, "storage_limit", None) or "",
            access_modes=getattr(args, "access_modes", None) or "",
            storage_class_name=getattr(args, "storage_class_name", None) or "",
        )

    def split_access_modes(self):
        """按逗号拆分访问模式，保留顺序和重复项"""
        if not self.access_modes:
            return []
        return self.access_modes.split(",")
