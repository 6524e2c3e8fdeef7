"""
this page displays the income dashboard of the user.

- the gross and net income totals of the latest date
- the gross and net income of each category at each date (bar plot)
- the gross and net income totals over time (line plot)
- the change of the gross and net totals from one date to the next (bar plot)
"""
import asyncio
import streamlit as st

from incdash.app.data_access.settings_data import load_settings
from incdash.app.exceptions import EmptyDatasetError, FetchError, ParseError
from incdash.app.services.income_service import load_dashboard
from incdash.app.utils.formatting import format_brl
from incdash.app.utils.logs import get_logger, setup_logging
from incdash.app.utils.plotting import (
    category_bar_chart_spec,
    totals_line_chart_spec,
    gains_bar_chart_spec,
    spec_to_figure,
)
from incdash.naming_conventions import ChartSlots, DisplaySlots, SettingsFields


settings = load_settings()
setup_logging(settings[SettingsFields.LOG_LEVEL.value])
logger = get_logger(__name__)

series = None
try:
    series = asyncio.run(
        load_dashboard(
            settings[SettingsFields.DATA_URL.value],
            base_url=settings[SettingsFields.BASE_URL.value],
            timeout=settings[SettingsFields.REQUEST_TIMEOUT.value],
        )
    )
except (FetchError, ParseError) as e:
    logger.error('Houve um problema com a operação fetch: %s', e)
except EmptyDatasetError as e:
    logger.warning('No income data to display: %s', e)
    st.info("No income data available yet.")

if series is not None:
    gross_col, net_col = st.columns(2)
    with gross_col.container(key=DisplaySlots.CURRENT_GROSS.value):
        st.metric("Rendimento Bruto Atual", format_brl(series.latest_gross_total))
    with net_col.container(key=DisplaySlots.CURRENT_NET.value):
        st.metric("Rendimento Líquido Atual", format_brl(series.latest_net_total))

    st.plotly_chart(spec_to_figure(category_bar_chart_spec(series)), key=ChartSlots.BAR.value)
    st.plotly_chart(spec_to_figure(totals_line_chart_spec(series)), key=ChartSlots.LINE.value)
    st.plotly_chart(spec_to_figure(gains_bar_chart_spec(series)), key=ChartSlots.GAIN.value)
