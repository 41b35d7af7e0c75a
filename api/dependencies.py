import logging

from application.services import ConverterSession
from config.settings import get_settings

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	session: ConverterSession | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.session = ConverterSession.from_settings(settings)
	deps.session.start()
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.session:
		await deps.session.close()
		deps.session = None

	logger.info('Cleanup complete')


def get_session() -> ConverterSession:
	if deps.session is None:
		raise RuntimeError('Converter session not initialized')
	return deps.session
