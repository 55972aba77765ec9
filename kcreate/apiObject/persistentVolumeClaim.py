import json
from dataclasses import dataclass, replace
from typing import Optional, Tuple

import yaml

from kcreate.resource.quantity import Quantity

API_VERSION = "v1"
KIND = "PersistentVolumeClaim"
RESOURCE_STORAGE = "storage"


@dataclass(frozen=True)
class PersistentVolumeClaim:
    """Persistent Volume Claim 对象类（构造完成后不可修改）"""

    name: str
    storage_request: Quantity
    namespace: str = ""
    storage_limit: Optional[Quantity] = None
    access_modes: Tuple[str, ...] = ()
    storage_class_name: Optional[str] = None
    annotations: Tuple[Tuple[str, str], ...] = ()

    api_version = API_VERSION
    kind = KIND

    def to_dict(self):
        """转换为字典格式，未设置的字段不输出"""
        metadata = {"name": self.name}
        if self.namespace:
            metadata["namespace"] = self.namespace
        if self.annotations:
            metadata["annotations"] = dict(self.annotations)

        resources = {"requests": {RESOURCE_STORAGE: str(self.storage_request)}}
        if self.storage_limit is not None:
            resources["limits"] = {RESOURCE_STORAGE: str(self.storage_limit)}

        spec = {}
        if self.access_modes:
            spec["accessModes"] = [str(mode) for mode in self.access_modes]
        spec["resources"] = resources
        if self.storage_class_name is not None:
            spec["storageClassName"] = self.storage_class_name

        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": metadata,
            "spec": spec,
        }

    def to_json(self):
        """转换为 JSON 字符串"""
        return json.dumps(self.to_dict(), indent=2)

    def to_yaml(self):
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    def with_annotation(self, key, value):
        """返回带有新注解的副本，同名注解会被覆盖"""
        annotations = dict(self.annotations)
        annotations[key] = value
        return replace(self, annotations=tuple(annotations.items()))

    def get_name(self):
        return self.name

    def get_namespace(self):
        return self.namespace

    def get_access_modes(self):
        return list(self.access_modes)

    def __str__(self):
        return f"PVC({self.name}, {self.storage_request}, {self.storage_limit})"
