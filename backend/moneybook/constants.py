"""
Static domain data: enumerations, curated lists and seed records.
"""

# ISO 4217 active currency codes.
ISO_4217_CURRENCY_CODES = frozenset(
    """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB
    BRL BSD BTN BWP BYN BZD CAD CDF CHF CLP CNY COP CRC CUP CVE CZK DJF DKK DOP
    DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD HNL HTG HUF
    IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW KWD KYD KZT LAK
    LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN MYR MZN
    NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD RUB RWF
    SAR SBD SCR SDG SEK SGD SHP SLE SOS SRD SSP STN SVC SYP SZL THB TJS TMT TND
    TOP TRY TTD TWD TZS UAH UGX USD UYU UZS VES VND VUV WST XAF XCD XOF XPF YER
    ZAR ZMW ZWL
    """.split()
)

# Display symbols used when formatting amounts; other codes render as the code itself.
CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "BRL": "R$",
    "CHF": "CHF",
    "CAD": "CA$",
    "AUD": "AU$",
    "INR": "₹",
    "KRW": "₩",
    "PLN": "zł",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "TRY": "₺",
    "UAH": "₴",
    "ILS": "₪",
    "NGN": "₦",
    "VND": "₫",
}

BASE_CURRENCY = {
    "code": "EUR",
    "symbol": "€",
    "name": "Euro",
    "exchange_rate": "1.0",
}


class AccountType:
    BANK = "Bank"
    CREDIT_CARD = "CreditCard"
    WALLET = "Wallet"

    CHOICES = [
        (BANK, "Bank Account"),
        (CREDIT_CARD, "Credit Card"),
        (WALLET, "Wallet"),
    ]


class CategoryType:
    EXPENSE = "Expense"
    INCOME = "Income"

    CHOICES = [
        (EXPENSE, "Expense"),
        (INCOME, "Income"),
    ]


class PayeeType:
    PERSON = "person"
    VENDOR = "vendor"

    CHOICES = [
        (PERSON, "Person"),
        (VENDOR, "Vendor"),
    ]


class Theme:
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"

    CHOICES = [
        (LIGHT, "Light"),
        (DARK, "Dark"),
        (AUTO, "Auto"),
    ]


HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

# Curated icon names a category may use (lucide icon identifiers).
CATEGORY_ICONS = frozenset(
    [
        "Banknote",
        "Briefcase",
        "Car",
        "ChartBar",
        "Clapperboard",
        "CreditCard",
        "DollarSign",
        "Gift",
        "GraduationCap",
        "Heart",
        "Home",
        "Landmark",
        "Laptop",
        "MoreHorizontal",
        "PiggyBank",
        "Plane",
        "RefreshCw",
        "Repeat",
        "Shield",
        "Shirt",
        "ShoppingBag",
        "ShoppingCart",
        "Sparkles",
        "TrendingUp",
        "Tv",
        "UtensilsCrossed",
        "Wallet",
        "Zap",
    ]
)

DEFAULT_CATEGORIES = [
    # Expense
    {"name": "Groceries", "type": CategoryType.EXPENSE, "color": "#22c55e", "icon": "ShoppingCart"},
    {"name": "Dining Out", "type": CategoryType.EXPENSE, "color": "#f97316", "icon": "UtensilsCrossed"},
    {"name": "Transportation", "type": CategoryType.EXPENSE, "color": "#3b82f6", "icon": "Car"},
    {"name": "Utilities", "type": CategoryType.EXPENSE, "color": "#eab308", "icon": "Zap"},
    {"name": "Rent/Mortgage", "type": CategoryType.EXPENSE, "color": "#8b5cf6", "icon": "Home"},
    {"name": "Healthcare", "type": CategoryType.EXPENSE, "color": "#ec4899", "icon": "Heart"},
    {"name": "Entertainment", "type": CategoryType.EXPENSE, "color": "#f43f5e", "icon": "Tv"},
    {"name": "Shopping", "type": CategoryType.EXPENSE, "color": "#14b8a6", "icon": "ShoppingBag"},
    {"name": "Insurance", "type": CategoryType.EXPENSE, "color": "#6366f1", "icon": "Shield"},
    {"name": "Education", "type": CategoryType.EXPENSE, "color": "#06b6d4", "icon": "GraduationCap"},
    {"name": "Personal Care", "type": CategoryType.EXPENSE, "color": "#a855f7", "icon": "Sparkles"},
    {"name": "Travel", "type": CategoryType.EXPENSE, "color": "#0ea5e9", "icon": "Plane"},
    {"name": "Subscriptions", "type": CategoryType.EXPENSE, "color": "#84cc16", "icon": "RefreshCw"},
    {"name": "Gifts & Donations", "type": CategoryType.EXPENSE, "color": "#f472b6", "icon": "Gift"},
    {"name": "Other Expenses", "type": CategoryType.EXPENSE, "color": "#64748b", "icon": "MoreHorizontal"},
    # Income
    {"name": "Salary", "type": CategoryType.INCOME, "color": "#10b981", "icon": "Wallet"},
    {"name": "Freelance", "type": CategoryType.INCOME, "color": "#3b82f6", "icon": "Briefcase"},
    {"name": "Investments", "type": CategoryType.INCOME, "color": "#8b5cf6", "icon": "TrendingUp"},
    {"name": "Gifts Received", "type": CategoryType.INCOME, "color": "#f59e0b", "icon": "Gift"},
    {"name": "Other Income", "type": CategoryType.INCOME, "color": "#64748b", "icon": "MoreHorizontal"},
]
