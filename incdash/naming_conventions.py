from enum import Enum


class IncomeRecordFields(Enum):
    NAME = 'nome'
    GROSS = 'bruto'
    NET = 'liquido'


class IncomeFrameColumns(Enum):
    DATE = 'date'
    NAME = IncomeRecordFields.NAME.value
    GROSS = IncomeRecordFields.GROSS.value
    NET = IncomeRecordFields.NET.value


class DisplaySlots(Enum):
    CURRENT_GROSS = 'current-gross-value'
    CURRENT_NET = 'current-net-value'


class ChartSlots(Enum):
    BAR = 'barChart'
    LINE = 'lineChart'
    GAIN = 'gainChart'


class ChartTypes(Enum):
    BAR = 'bar'
    LINE = 'line'


class SettingsFields(Enum):
    DATA_URL = 'data_url'
    BASE_URL = 'base_url'
    REQUEST_TIMEOUT = 'request_timeout'
    LOG_LEVEL = 'log_level'


GROSS_LABEL = 'Bruto'
NET_LABEL = 'Líquido'
