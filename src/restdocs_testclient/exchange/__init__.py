# imports here allow aggregrating types under restdocs_testclient.exchange
# pylint: disable=useless-import-alias
from ._models import ExchangeResult as ExchangeResult
from ._models import RawStatusExchangeResult as RawStatusExchangeResult
from ._models import CapturedExchange as CapturedExchange
from ._adapters import HttpxExchangeResult as HttpxExchangeResult
from ._adapters import RequestsExchangeResult as RequestsExchangeResult
from ._adapters import StarletteExchangeResult as StarletteExchangeResult
from ._binding import bind_exchange_result as bind_exchange_result
