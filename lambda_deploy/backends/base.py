"""Function service backend abstract base class"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, Optional


@dataclass
class CallerIdentity:
    """Identity the backend is authenticated as"""
    account: str
    arn: str
    user_id: Optional[str] = None


@dataclass
class FunctionUpdate:
    """Response of a function code update"""
    function_name: str
    version: Optional[str] = None
    code_sha256: Optional[str] = None
    code_size: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict)


class FunctionBackend(ABC):
    """Abstract base class for remote function services"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize backend

        Args:
            config: Backend-specific configuration
        """
        self.config = config or {}

    @abstractmethod
    def get_identity(self, region: str) -> CallerIdentity:
        """
        Probe the configured credentials

        Args:
            region: Service region

        Returns:
            The authenticated identity

        Raises:
            RemoteError: If no usable identity is configured
        """
        pass

    @abstractmethod
    def update_function_code(self,
                             function_name: str,
                             zip_bytes: bytes,
                             region: str,
                             publish: bool = True) -> FunctionUpdate:
        """
        Replace the code of an existing function

        Args:
            function_name: Remote function name
            zip_bytes: Archive content
            region: Service region
            publish: Also publish a new immutable version

        Returns:
            FunctionUpdate describing the new code

        Raises:
            RemoteError: On any failure, including an unknown function
        """
        pass
