"""Field types and the model base shared by every vendor package."""

from apiwrap.types.base import ApiModel
from apiwrap.types.base64_data import Base64Data
from apiwrap.types.phone_number import PhoneNumber

__all__ = ["ApiModel", "Base64Data", "PhoneNumber"]
