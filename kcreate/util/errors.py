"""
kcreate 错误类型
核心模块（quantity / validator / builder）只抛出，不记录日志也不吞掉异常
"""


class KCreateError(Exception):
    """所有 kcreate 错误的基类"""


class ValidationError(KCreateError, ValueError):
    """原始输入格式错误（缺少必填项、访问模式非法）"""


class ParseError(KCreateError, ValueError):
    """容量字符串不符合 quantity 语法"""

    def __init__(self, raw, reason="quantities must match the regular expression '^([+-]?[0-9.]+)([eEinumkKMGTP]*[-+]?[0-9]*)$'"):
        self.raw = raw
        super().__init__(f"unable to parse quantity {raw!r}: {reason}")


class BuildError(KCreateError, ValueError):
    """解析成功之后才能发现的语义冲突"""


class ApiError(KCreateError):
    """API Server 请求失败"""

    def __init__(self, message, status_code=None, body=None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
