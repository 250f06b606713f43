from nyaya.gateway.factory import ModelGatewayFactory
from nyaya.gateway.gateway import ModelGateway
from nyaya.gateway.models import ModelRequest, ModelResponse

__all__ = ["ModelGateway", "ModelGatewayFactory", "ModelRequest", "ModelResponse"]
