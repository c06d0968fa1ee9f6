"""Exception definitions for lambda-deploy API"""

from ..constants import ErrorCode


class LambdaDeployError(Exception):
    """Base exception for lambda-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(LambdaDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ProjectNotFoundError(LambdaDeployError):
    """Project root not found error"""

    def __init__(self, message: str = None):
        if message is None:
            message = (
                "No project root found. Please ensure:\n"
                "1. You are in a functions repository\n"
                "2. The project root contains .lambda-deploy.yaml or a lambdas/ directory\n"
                "3. Or use --project-root parameter to specify project location"
            )
        super().__init__(message, ErrorCode.PROJECT_NOT_FOUND)


class PrerequisiteError(LambdaDeployError):
    """A required tool or credential is unavailable"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.PREREQUISITE_FAILED)


class PackageError(LambdaDeployError):
    """Packaging operation error"""

    def __init__(self, message: str, error_code: str = ErrorCode.PACKAGE_FAILED):
        super().__init__(message, error_code)


class DependencyInstallError(PackageError):
    """Dependency installer returned an error"""

    def __init__(self, message: str, returncode: int = None):
        super().__init__(message, ErrorCode.DEPENDENCY_INSTALL_FAILED)
        self.returncode = returncode


class RemoteError(LambdaDeployError):
    """Remote function service call failed"""

    def __init__(self, message: str, function_name: str = None):
        super().__init__(message, ErrorCode.REMOTE_CALL_FAILED)
        self.function_name = function_name
