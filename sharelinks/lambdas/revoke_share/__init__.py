from sharelinks.utils import initialize_logging


initialize_logging()
