"""Builders for GetSupportedProtocol requests and responses."""

from ..msg import Body, GetSupportedProtocol, GetSupportedProtocolResp
from .common import request_body, response_body


class GetSupportedProtocolBuilder:
    def __init__(self, controller_supported_protocol_versions: str) -> None:
        self.controller_supported_protocol_versions = controller_supported_protocol_versions

    def build(self) -> Body:
        return request_body(
            GetSupportedProtocol(controller_supported_protocol_versions=self.controller_supported_protocol_versions)
        )


class GetSupportedProtocolRespBuilder:
    def __init__(self, agent_supported_protocol_versions: str) -> None:
        self.agent_supported_protocol_versions = agent_supported_protocol_versions

    def build(self) -> Body:
        return response_body(
            GetSupportedProtocolResp(agent_supported_protocol_versions=self.agent_supported_protocol_versions)
        )
