import logging

import requests

from kcreate.config.uriConfig import URIConfig
from kcreate.util.errors import ApiError


class ApiClient:
    """API Server 的 HTTP 客户端"""

    def __init__(self, uri_config=None, session=None):
        self.uri_config = uri_config or URIConfig()
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def _url(self, path):
        return f"{self.uri_config.base_url}{path}"

    def post(self, path, data, params=None):
        """POST JSON 数据，返回响应体（dict）"""
        url = self._url(path)
        self.logger.debug(f"POST {url} params={params}")
        try:
            response = self.session.post(
                url, json=data, params=params, timeout=self.uri_config.TIMEOUT
            )
        except requests.RequestException as e:
            raise ApiError(f"request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise ApiError(
                f"server returned {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        self.logger.info(f"POST {url} -> {response.status_code}")
        try:
            return response.json()
        except ValueError:
            # 部分 API Server 实现只返回状态码
            return data

    def create_pvc(self, namespace, pvc_dict, params=None):
        return self.post(self.uri_config.pvcs_url(namespace), pvc_dict, params=params)
