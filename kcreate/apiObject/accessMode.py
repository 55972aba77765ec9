from enum import Enum


class AccessMode(str, Enum):
    """PVC 访问模式（固定集合）"""

    READ_ONLY_MANY = "ReadOnlyMany"
    READ_WRITE_MANY = "ReadWriteMany"
    READ_WRITE_ONCE = "ReadWriteOnce"

    @classmethod
    def values(cls):
        return [mode.value for mode in cls]

    @classmethod
    def is_valid(cls, token):
        return token in cls.values()

    def __str__(self):
        return self.value
