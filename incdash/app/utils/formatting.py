CURRENCY_SYMBOL = 'R$'

# swap the en-US separators for the pt-BR ones
_PT_BR_SEPARATORS = str.maketrans({',': '.', '.': ','})


def format_brl(value: int | float) -> str:
    """
    Format an amount as Brazilian Real currency text

    Parameters
    ----------
    value : int | float
        the amount to format

    Returns
    -------
    str
        the amount with two decimal places, a dot as the thousands separator and a comma as the decimal separator,
        e.g. 1200 -> 'R$ 1.200,00' and -5.5 -> '-R$ 5,50'
    """
    amount = f'{abs(value):,.2f}'.translate(_PT_BR_SEPARATORS)
    sign = '-' if value < 0 and amount != '0,00' else ''
    return f'{sign}{CURRENCY_SYMBOL} {amount}'
