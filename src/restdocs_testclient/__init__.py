# imports here allow aggregrating the public API under restdocs_testclient
# pylint: disable=useless-import-alias
from .config import Config as Config
from .converter import ResponseConverter as ResponseConverter
from .converter import convert_response as convert_response
from .documenter import OperationDocumenter as OperationDocumenter
from .exchange import CapturedExchange as CapturedExchange
from .exchange import ExchangeResult as ExchangeResult
from .exchange import RawStatusExchangeResult as RawStatusExchangeResult
from .exchange import bind_exchange_result as bind_exchange_result
from .factory import OperationResponseFactory as OperationResponseFactory
from .models import HttpHeaders as HttpHeaders
from .models import MediaType as MediaType
from .models import OperationResponse as OperationResponse
from .models import ResponseCookie as ResponseCookie
from .persistence import YamlOperationPersister as YamlOperationPersister
