from log import logger

_LOGGER = logger.Logger()

debug = _LOGGER.debug
info = _LOGGER.info
warning = _LOGGER.warning
error = _LOGGER.error
