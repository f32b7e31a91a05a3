from echonest.utils.httpx_utils.echonest_client import DispatchResult, EchonestAPIClient, encode_options

__all__ = [
    "DispatchResult",
    "EchonestAPIClient",
    "encode_options",
]
