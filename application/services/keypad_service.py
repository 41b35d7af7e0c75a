import logging
import math

from domain.models.keypad import Key, KeypadState, Operator

logger = logging.getLogger(__name__)


def parse_number(text: str) -> float | None:
	if not text:
		return None
	try:
		return float(text)
	except ValueError:
		return None


def format_number(value: float) -> str:
	text = repr(value)
	return text[:-2] if text.endswith('.0') else text


def format_result(value: float) -> str:
	return f'{value:.2f}'


def _divide(dividend: float, divisor: float) -> float:
	# IEEE 754 semantics instead of ZeroDivisionError
	if divisor == 0:
		if dividend == 0 or math.isnan(dividend):
			return math.nan
		return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
	return dividend / divisor


def apply_operator(operator: Operator, left: float, right: float) -> float:
	if operator is Operator.DIVIDE:
		return _divide(left, right)
	if operator is Operator.MULTIPLY:
		return left * right
	if operator is Operator.SUBTRACT:
		return left - right
	return left + right


class KeypadStateMachine:
	"""
	Four-function calculator driven one key at a time.

	There is no precedence: an operator key stores the entry as the left
	operand, and equals resolves it against the next entry. Keys that need a
	number while the entry does not parse as one leave the state unchanged.
	"""

	def __init__(self, state: KeypadState | None = None):
		self.state = state or KeypadState()

	@property
	def display_entry(self) -> str:
		return self.state.current_entry or '0'

	@property
	def current_value(self) -> float | None:
		return parse_number(self.state.current_entry)

	def clear(self) -> None:
		self.state.current_entry = ''
		self.state.pending_operator = None
		self.state.pending_operand = None

	def on_key(self, token: Key | str) -> str:
		key = Key.parse(token)
		if key is None:
			logger.debug(f'Ignoring unknown key {token!r}')
			return self.display_entry

		state = self.state
		value = self.current_value

		if key is Key.CLEAR:
			self.clear()
		elif key.is_digit:
			state.current_entry += key.value
		elif key is Key.POINT:
			if '.' not in state.current_entry:
				state.current_entry += key.value
		elif key is Key.NEGATE:
			if value is not None:
				state.current_entry = format_number(-value)
		elif key is Key.PERCENT:
			if value is not None:
				state.current_entry = format_number(value / 100)
		elif key.operator is not None:
			if value is not None:
				state.pending_operand = value
				state.pending_operator = key.operator
				state.current_entry = ''
		elif key is Key.EQUALS:
			if value is not None and state.pending_operand is not None and state.pending_operator is not None:
				result = apply_operator(state.pending_operator, state.pending_operand, value)
				state.current_entry = format_result(result)
				state.pending_operator = None
				state.pending_operand = None
		else:
			logger.debug(f'Ignoring decorative key {key.value!r}')

		return self.display_entry
