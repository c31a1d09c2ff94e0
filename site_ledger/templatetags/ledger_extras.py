from django import template

from ..conf import ledger_setting

register = template.Library()

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€", "GBP": "£"}


def group_indian(whole):
    # 12345678 -> 1,23,45,678
    digits = str(whole)
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


@register.filter
def currency(value):
    try:
        amount = round(float(value), 2)
    except (TypeError, ValueError):
        return value

    code = ledger_setting("CURRENCY")
    symbol = CURRENCY_SYMBOLS.get(code, code + " ")
    sign = "-" if amount < 0 else ""
    whole, _, fraction = f"{abs(amount):.2f}".partition(".")

    if code == "INR":
        whole = group_indian(int(whole))
    else:
        whole = f"{int(whole):,}"
    return f"{sign}{symbol}{whole}.{fraction}"
