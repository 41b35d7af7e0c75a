from .conversion_service import ConversionService
from .keypad_service import KeypadStateMachine
from .rate_service import RateService
from .session_service import ConverterSession

__all__ = ['ConversionService', 'ConverterSession', 'KeypadStateMachine', 'RateService']
