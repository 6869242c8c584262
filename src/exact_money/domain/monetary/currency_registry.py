from exact_money.domain.monetary.currency import Currency, CurrencyType

# Fiat currencies (ISO 4217: code, numeric code, minor-unit digits)
USD = Currency("USD", 840, 2, "US Dollar")
EUR = Currency("EUR", 978, 2, "Euro")
GBP = Currency("GBP", 826, 2, "Pound Sterling")
CHF = Currency("CHF", 756, 2, "Swiss Franc")
CNY = Currency("CNY", 156, 2, "Yuan Renminbi")
JPY = Currency("JPY", 392, 0, "Yen")
KRW = Currency("KRW", 410, 0, "Won")
KZT = Currency("KZT", 398, 2, "Tenge")
BYN = Currency("BYN", 933, 2, "Belarusian Ruble")
KWD = Currency("KWD", 414, 3, "Kuwaiti Dinar")
BHD = Currency("BHD", 48, 3, "Bahraini Dinar")

# Russian ruble: RUR (810) is the domestic code money is kept in, RUB (643) is the
# international one. Both stay registered; `CurrencyPolicy` decides which one is usable.
RUR = Currency("RUR", 810, 2, "Russian Ruble")
RUB = Currency("RUB", 643, 2, "Russian Ruble")

# Crypto currencies
BTC = Currency("BTC", None, 8, "Bitcoin", CurrencyType.CRYPTO)

# Commodities
XAU = Currency("XAU", 959, 4, "Gold", CurrencyType.COMMODITY)

PREDEFINED_CURRENCIES = (USD, EUR, GBP, CHF, CNY, JPY, KRW, KZT, BYN, KWD, BHD, RUR, RUB, BTC, XAU)

# Register all predefined currencies
for _currency in PREDEFINED_CURRENCIES:
    Currency.register(_currency, overwrite=True)
