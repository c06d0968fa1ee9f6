"""Remote function service backends for lambda-deploy"""

from .base import FunctionBackend, CallerIdentity, FunctionUpdate
from .aws_lambda import LambdaBackend

__all__ = [
    'FunctionBackend',
    'CallerIdentity',
    'FunctionUpdate',
    'LambdaBackend',
]
