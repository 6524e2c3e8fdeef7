import plotly.graph_objects as go

from typing import Any

from incdash.app.services.income_service import DerivedSeries
from incdash.naming_conventions import ChartTypes, GROSS_LABEL, NET_LABEL


BASE_COLORS = ['#E4572E', '#3D619A', '#3C887E', '#C2B893', '#7A6563']
NET_ALPHA = 0.6
GROSS_TOTAL_COLOR = '#007bff'
NET_TOTAL_COLOR = '#28a745'
VALUE_AXIS_TITLE = 'Valor (R$)'
GAIN_AXIS_TITLE = 'Rendimento (R$)'

ChartSpec = dict[str, Any]


def hex_to_rgba(color: str, alpha: float) -> str:
    """convert a '#RRGGBB' color to an 'rgba(r, g, b, alpha)' color"""
    assert len(color) == 7 and color.startswith('#'), f'color should be in the #RRGGBB format, got {color}'
    red, green, blue = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    return f'rgba({red}, {green}, {blue}, {alpha})'


def _value_axis(title: str, begin_at_zero: bool, stacked: bool | None = None) -> dict:
    axis = {'beginAtZero': begin_at_zero, 'title': {'display': True, 'text': title}}
    if stacked is not None:
        axis['stacked'] = stacked
    return axis


def category_bar_chart_spec(series: DerivedSeries) -> ChartSpec:
    """
    Build the bar chart of the gross and net income of each category at each date

    Parameters
    ----------
    series : DerivedSeries
        the aggregates of the income data

    Returns
    -------
    ChartSpec
        a bar chart labeled by the dates, with a gross dataset followed by a net dataset for each category. Both
        datasets of a category share its base color, the net one as a semi-transparent tint of it
    """
    datasets = []
    for index, category in enumerate(series.categories):
        base_color = BASE_COLORS[index % len(BASE_COLORS)]
        datasets.append({
            'label': f'{category} ({GROSS_LABEL})',
            'data': series.gross_by_category[category],
            'backgroundColor': base_color,
        })
        datasets.append({
            'label': f'{category} ({NET_LABEL})',
            'data': series.net_by_category[category],
            'backgroundColor': hex_to_rgba(base_color, NET_ALPHA),
        })

    return {
        'type': ChartTypes.BAR.value,
        'data': {'labels': list(series.dates), 'datasets': datasets},
        'options': {
            'responsive': True,
            'scales': {
                'x': {'stacked': False},
                'y': _value_axis(VALUE_AXIS_TITLE, begin_at_zero=False, stacked=False),
            },
            'plugins': {'tooltip': {'mode': 'index', 'intersect': False}},
        },
    }


def totals_line_chart_spec(series: DerivedSeries) -> ChartSpec:
    """build the line chart of the gross and net totals at each date"""
    return {
        'type': ChartTypes.LINE.value,
        'data': {
            'labels': list(series.dates),
            'datasets': [
                {
                    'label': f'Total {GROSS_LABEL}',
                    'data': series.gross_totals,
                    'borderColor': GROSS_TOTAL_COLOR,
                    'backgroundColor': hex_to_rgba(GROSS_TOTAL_COLOR, 0.5),
                    'tension': 0.1,
                },
                {
                    'label': f'Total {NET_LABEL}',
                    'data': series.net_totals,
                    'borderColor': NET_TOTAL_COLOR,
                    'backgroundColor': hex_to_rgba(NET_TOTAL_COLOR, 0.5),
                    'tension': 0.1,
                },
            ],
        },
        'options': {
            'responsive': True,
            'scales': {'y': _value_axis(VALUE_AXIS_TITLE, begin_at_zero=False)},
        },
    }


def gains_bar_chart_spec(series: DerivedSeries) -> ChartSpec:
    """
    Build the bar chart of the change of the gross and net totals from one date to the next

    Parameters
    ----------
    series : DerivedSeries
        the aggregates of the income data

    Returns
    -------
    ChartSpec
        a bar chart labeled by every date but the first, each bar being the change since the previous date
    """
    return {
        'type': ChartTypes.BAR.value,
        'data': {
            'labels': list(series.delta_dates),
            'datasets': [
                {
                    'label': f'Rendimento {GROSS_LABEL} por Data',
                    'data': series.gross_deltas,
                    'backgroundColor': hex_to_rgba(GROSS_TOTAL_COLOR, 0.7),
                },
                {
                    'label': f'Rendimento {NET_LABEL} por Data',
                    'data': series.net_deltas,
                    'backgroundColor': hex_to_rgba(NET_TOTAL_COLOR, 0.7),
                },
            ],
        },
        'options': {
            'responsive': True,
            'scales': {'y': _value_axis(GAIN_AXIS_TITLE, begin_at_zero=True)},
        },
    }


def spec_to_figure(spec: ChartSpec) -> go.Figure:
    """
    Draw a chart specification as a plotly figure

    Parameters
    ----------
    spec : ChartSpec
        the chart specification, as returned by the ``*_chart_spec`` functions

    Returns
    -------
    go.Figure
        a figure with one trace per dataset of the specification, in the same order. None values are left as gaps
    """
    labels = spec['data']['labels']
    fig = go.Figure()
    for dataset in spec['data']['datasets']:
        match spec['type']:
            case 'bar':
                trace = go.Bar(
                    x=labels,
                    y=dataset['data'],
                    name=dataset['label'],
                    marker_color=dataset['backgroundColor'],
                )
            case 'line':
                trace = go.Scatter(
                    x=labels,
                    y=dataset['data'],
                    name=dataset['label'],
                    mode='lines+markers',
                    line=dict(color=dataset['borderColor'], shape='spline' if dataset.get('tension') else 'linear'),
                    marker_color=dataset['backgroundColor'],
                )
            case _:
                raise ValueError(f'Invalid chart type: {spec["type"]}')
        fig.add_trace(trace)

    y_axis = spec['options']['scales']['y']
    fig.update_layout(
        barmode='group',
        xaxis_type='category',
        yaxis_title=y_axis['title']['text'],
        yaxis_rangemode='tozero' if y_axis['beginAtZero'] else 'normal',
        hovermode='x unified' if 'plugins' in spec['options'] else 'closest',
    )
    return fig
