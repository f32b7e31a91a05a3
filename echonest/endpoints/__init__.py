from echonest.endpoints.endpoint_table import ENDPOINT_TABLE, Endpoint
from echonest.endpoints.facade import EchonestFacade

__all__ = ["ENDPOINT_TABLE", "Endpoint", "EchonestFacade"]
