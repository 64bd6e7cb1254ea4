# Namespace for pipeline steps
from .load_companies import LoadCompanyRows, NoValidInputError  # noqa: F401
from .crawl_companies import CrawlCompanies  # noqa: F401
from .write_results import WriteResults  # noqa: F401
