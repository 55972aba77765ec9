import os


class URIConfig:
    """API Server 地址与 URL 模板，默认值可以通过环境变量覆盖"""

    HOST = os.environ.get("KCREATE_APISERVER_HOST", "localhost")
    PORT = int(os.environ.get("KCREATE_APISERVER_PORT", "5050"))
    SCHEME = os.environ.get("KCREATE_APISERVER_SCHEME", "http")
    TIMEOUT = float(os.environ.get("KCREATE_REQUEST_TIMEOUT", "10"))

    PVCS_URL = "/api/v1/namespaces/{namespace}/persistentvolumeclaims"

    def __init__(self, server=None):
        # --server 优先于环境变量
        if server:
            self.base_url = server.rstrip("/")
        else:
            self.base_url = f"{self.SCHEME}://{self.HOST}:{self.PORT}"

    def pvcs_url(self, namespace):
        return self.PVCS_URL.format(namespace=namespace)


def resolve_namespace(namespace=None):
    """
    获取当前命名空间

    Returns:
        (namespace, enforce_namespace): 显式指定（参数或 KCREATE_NAMESPACE）时 enforce 为 True
    """
    if namespace:
        return namespace, True
    env_namespace = os.environ.get("KCREATE_NAMESPACE")
    if env_namespace:
        return env_namespace, True
    return "default", False
