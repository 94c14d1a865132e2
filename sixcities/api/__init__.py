"""
API Module Exports

The application itself lives in ``sixcities.api.app``.
"""

from .controller import BaseController, HttpMethod
from .exceptions import HttpError, OfferNotFoundError

__all__ = ['BaseController', 'HttpMethod', 'HttpError', 'OfferNotFoundError']
