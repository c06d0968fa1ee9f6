"""AWS Lambda backend"""

import logging
from typing import Dict, Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .base import FunctionBackend, CallerIdentity, FunctionUpdate
from ..api.exceptions import RemoteError

logger = logging.getLogger(__name__)


def _describe_error(error: Exception) -> str:
    if isinstance(error, ClientError):
        err = error.response.get('Error', {})
        return f"{err.get('Code', 'ClientError')}: {err.get('Message', str(error))}"
    return str(error)


class LambdaBackend(FunctionBackend):
    """AWS Lambda implementation using boto3

    Clients are created per region on first use and reused afterwards.
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize Lambda backend

        Args:
            config: Optional settings:
                - profile: AWS named profile
                - endpoint_url: Custom endpoint (for local emulators)
        """
        super().__init__(config)
        self._session = None
        self._clients: Dict[tuple, Any] = {}

    @property
    def session(self):
        if self._session is None:
            profile = self.config.get('profile')
            self._session = boto3.session.Session(profile_name=profile) if profile else boto3.session.Session()
        return self._session

    def _client(self, service: str, region: str):
        key = (service, region)
        if key not in self._clients:
            kwargs = {'region_name': region}
            if self.config.get('endpoint_url'):
                kwargs['endpoint_url'] = self.config['endpoint_url']
            self._clients[key] = self.session.client(service, **kwargs)
        return self._clients[key]

    def get_identity(self, region: str) -> CallerIdentity:
        try:
            response = self._client('sts', region).get_caller_identity()
        except (BotoCoreError, ClientError) as e:
            raise RemoteError(f"AWS credentials not configured: {_describe_error(e)}")

        return CallerIdentity(
            account=response.get('Account', ''),
            arn=response.get('Arn', ''),
            user_id=response.get('UserId'),
        )

    def update_function_code(self,
                             function_name: str,
                             zip_bytes: bytes,
                             region: str,
                             publish: bool = True) -> FunctionUpdate:
        logger.info(f"Updating code of {function_name} in {region} ({len(zip_bytes)} bytes)")

        try:
            response = self._client('lambda', region).update_function_code(
                FunctionName=function_name,
                ZipFile=zip_bytes,
                Publish=publish,
            )
        except (BotoCoreError, ClientError) as e:
            raise RemoteError(
                f"update-function-code failed for {function_name}: {_describe_error(e)}",
                function_name=function_name,
            )

        response.pop('ResponseMetadata', None)
        return FunctionUpdate(
            function_name=response.get('FunctionName', function_name),
            version=response.get('Version'),
            code_sha256=response.get('CodeSha256'),
            code_size=response.get('CodeSize'),
            raw=response,
        )
