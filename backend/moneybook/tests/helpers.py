from moneybook.models import Account, Category, Currency


def make_currency(code="EUR", symbol="€", name="Euro", exchange_rate="1.0", **extra):
    return Currency.objects.create(code=code, symbol=symbol, name=name, exchange_rate=exchange_rate, **extra)


def make_category(name="Groceries", type="Expense", color="#22c55e", icon="ShoppingCart", **extra):
    return Category.objects.create(name=name, type=type, color=color, icon=icon, **extra)


def make_account(currency, name="Checking", type="Bank", balance=0, **extra):
    return Account.objects.create(name=name, type=type, currency=currency, balance=balance, **extra)
