"""ISO 4217 code table and rounding exceptions.

CURRENCIES is sorted strictly ascending by code and is 1-indexed: position 0
holds a reserved empty entry so that table indexes line up with external
numeric ID schemes. Codes follow the Unicode CLDR currency list, which keeps
withdrawn codes (ADP, DEM, ZWR, ...) so that historical data stays parseable.

Rounding data follows CLDR supplemental currencyData "fractions". Entries
without an explicit exception use the default two-decimal, one-unit rule.

Python 3.13+. Zero external dependencies.
"""

from .records import CurrencyEntry, RoundingException, RoundingRule

__all__ = [
    "CURRENCIES",
    "NUM_CURRENCIES",
    "ROUNDING_EXCEPTIONS",
]

_TWO_DECIMALS = RoundingRule(2, 1)
_ZERO_DECIMALS = RoundingRule(0, 1)

# Index 0 is the default and must stay first.
ROUNDING_EXCEPTIONS: tuple[RoundingException, ...] = (
    RoundingException(standard=_TWO_DECIMALS, cash=_TWO_DECIMALS),
    RoundingException(standard=_ZERO_DECIMALS, cash=_ZERO_DECIMALS),
    RoundingException(standard=RoundingRule(3, 1), cash=RoundingRule(3, 1)),
    RoundingException(standard=RoundingRule(4, 1), cash=RoundingRule(4, 1)),
    RoundingException(standard=_TWO_DECIMALS, cash=_ZERO_DECIMALS),
    RoundingException(standard=_TWO_DECIMALS, cash=RoundingRule(2, 5)),
    RoundingException(standard=_TWO_DECIMALS, cash=RoundingRule(2, 50)),
)

_ZERO = 1  # no minor unit
_THREE = 2  # three decimals
_FOUR = 3  # four decimals (accounting units)
_CASH_ZERO = 4  # cash in whole units only
_CASH_NICKEL = 5  # cash to 0.05
_CASH_FIFTY = 6  # cash to 0.50

CURRENCIES: tuple[CurrencyEntry, ...] = (
    CurrencyEntry(""),  # reserved
    CurrencyEntry("ADP", _ZERO),
    CurrencyEntry("AED"),
    CurrencyEntry("AFA"),
    CurrencyEntry("AFN", _ZERO),
    CurrencyEntry("ALK"),
    CurrencyEntry("ALL", _ZERO),
    CurrencyEntry("AMD", _CASH_ZERO),
    CurrencyEntry("ANG"),
    CurrencyEntry("AOA"),
    CurrencyEntry("AOK"),
    CurrencyEntry("AON"),
    CurrencyEntry("AOR"),
    CurrencyEntry("ARA"),
    CurrencyEntry("ARL"),
    CurrencyEntry("ARM"),
    CurrencyEntry("ARP"),
    CurrencyEntry("ARS"),
    CurrencyEntry("ATS"),
    CurrencyEntry("AUD"),
    CurrencyEntry("AWG"),
    CurrencyEntry("AZM"),
    CurrencyEntry("AZN"),
    CurrencyEntry("BAD"),
    CurrencyEntry("BAM"),
    CurrencyEntry("BAN"),
    CurrencyEntry("BBD"),
    CurrencyEntry("BDT"),
    CurrencyEntry("BEC"),
    CurrencyEntry("BEF"),
    CurrencyEntry("BEL"),
    CurrencyEntry("BGL"),
    CurrencyEntry("BGM"),
    CurrencyEntry("BGN"),
    CurrencyEntry("BGO"),
    CurrencyEntry("BHD", _THREE),
    CurrencyEntry("BIF", _ZERO),
    CurrencyEntry("BMD"),
    CurrencyEntry("BND"),
    CurrencyEntry("BOB"),
    CurrencyEntry("BOL"),
    CurrencyEntry("BOP"),
    CurrencyEntry("BOV"),
    CurrencyEntry("BRB"),
    CurrencyEntry("BRC"),
    CurrencyEntry("BRE"),
    CurrencyEntry("BRL"),
    CurrencyEntry("BRN"),
    CurrencyEntry("BRR"),
    CurrencyEntry("BRZ"),
    CurrencyEntry("BSD"),
    CurrencyEntry("BTN"),
    CurrencyEntry("BUK"),
    CurrencyEntry("BWP"),
    CurrencyEntry("BYB"),
    CurrencyEntry("BYN"),
    CurrencyEntry("BYR", _ZERO),
    CurrencyEntry("BZD"),
    CurrencyEntry("CAD", _CASH_NICKEL),
    CurrencyEntry("CDF"),
    CurrencyEntry("CHE"),
    CurrencyEntry("CHF", _CASH_NICKEL),
    CurrencyEntry("CHW"),
    CurrencyEntry("CLE"),
    CurrencyEntry("CLF", _FOUR),
    CurrencyEntry("CLP", _ZERO),
    CurrencyEntry("CNH"),
    CurrencyEntry("CNX"),
    CurrencyEntry("CNY"),
    CurrencyEntry("COP", _CASH_ZERO),
    CurrencyEntry("COU"),
    CurrencyEntry("CRC", _CASH_ZERO),
    CurrencyEntry("CSD"),
    CurrencyEntry("CSK"),
    CurrencyEntry("CUC"),
    CurrencyEntry("CUP"),
    CurrencyEntry("CVE"),
    CurrencyEntry("CYP"),
    CurrencyEntry("CZK", _CASH_ZERO),
    CurrencyEntry("DDM"),
    CurrencyEntry("DEM"),
    CurrencyEntry("DJF", _ZERO),
    CurrencyEntry("DKK", _CASH_FIFTY),
    CurrencyEntry("DOP"),
    CurrencyEntry("DZD"),
    CurrencyEntry("ECS"),
    CurrencyEntry("ECV"),
    CurrencyEntry("EEK"),
    CurrencyEntry("EGP"),
    CurrencyEntry("ERN"),
    CurrencyEntry("ESA"),
    CurrencyEntry("ESB"),
    CurrencyEntry("ESP", _ZERO),
    CurrencyEntry("ETB"),
    CurrencyEntry("EUR"),
    CurrencyEntry("FIM"),
    CurrencyEntry("FJD"),
    CurrencyEntry("FKP"),
    CurrencyEntry("FRF"),
    CurrencyEntry("GBP"),
    CurrencyEntry("GEK"),
    CurrencyEntry("GEL"),
    CurrencyEntry("GHC"),
    CurrencyEntry("GHS"),
    CurrencyEntry("GIP"),
    CurrencyEntry("GMD"),
    CurrencyEntry("GNF", _ZERO),
    CurrencyEntry("GNS"),
    CurrencyEntry("GQE"),
    CurrencyEntry("GRD"),
    CurrencyEntry("GTQ"),
    CurrencyEntry("GWE"),
    CurrencyEntry("GWP"),
    CurrencyEntry("GYD", _CASH_ZERO),
    CurrencyEntry("HKD"),
    CurrencyEntry("HNL"),
    CurrencyEntry("HRD"),
    CurrencyEntry("HRK"),
    CurrencyEntry("HTG"),
    CurrencyEntry("HUF", _CASH_ZERO),
    CurrencyEntry("IDR", _CASH_ZERO),
    CurrencyEntry("IEP"),
    CurrencyEntry("ILP"),
    CurrencyEntry("ILR"),
    CurrencyEntry("ILS"),
    CurrencyEntry("INR"),
    CurrencyEntry("IQD", _ZERO),
    CurrencyEntry("IRR", _ZERO),
    CurrencyEntry("ISJ"),
    CurrencyEntry("ISK", _ZERO),
    CurrencyEntry("ITL", _ZERO),
    CurrencyEntry("JMD"),
    CurrencyEntry("JOD", _THREE),
    CurrencyEntry("JPY", _ZERO),
    CurrencyEntry("KES"),
    CurrencyEntry("KGS"),
    CurrencyEntry("KHR"),
    CurrencyEntry("KMF", _ZERO),
    CurrencyEntry("KPW", _ZERO),
    CurrencyEntry("KRH"),
    CurrencyEntry("KRO"),
    CurrencyEntry("KRW", _ZERO),
    CurrencyEntry("KWD", _THREE),
    CurrencyEntry("KYD"),
    CurrencyEntry("KZT"),
    CurrencyEntry("LAK", _ZERO),
    CurrencyEntry("LBP", _ZERO),
    CurrencyEntry("LKR"),
    CurrencyEntry("LRD"),
    CurrencyEntry("LSL"),
    CurrencyEntry("LTL"),
    CurrencyEntry("LTT"),
    CurrencyEntry("LUC"),
    CurrencyEntry("LUF", _ZERO),
    CurrencyEntry("LUL"),
    CurrencyEntry("LVL"),
    CurrencyEntry("LVR"),
    CurrencyEntry("LYD", _THREE),
    CurrencyEntry("MAD"),
    CurrencyEntry("MAF"),
    CurrencyEntry("MCF"),
    CurrencyEntry("MDC"),
    CurrencyEntry("MDL"),
    CurrencyEntry("MGA", _ZERO),
    CurrencyEntry("MGF", _ZERO),
    CurrencyEntry("MKD"),
    CurrencyEntry("MKN"),
    CurrencyEntry("MLF"),
    CurrencyEntry("MMK", _ZERO),
    CurrencyEntry("MNT", _CASH_ZERO),
    CurrencyEntry("MOP"),
    CurrencyEntry("MRO", _ZERO),
    CurrencyEntry("MRU"),
    CurrencyEntry("MTL"),
    CurrencyEntry("MTP"),
    CurrencyEntry("MUR", _CASH_ZERO),
    CurrencyEntry("MVP"),
    CurrencyEntry("MVR"),
    CurrencyEntry("MWK"),
    CurrencyEntry("MXN"),
    CurrencyEntry("MXP"),
    CurrencyEntry("MXV"),
    CurrencyEntry("MYR"),
    CurrencyEntry("MZE"),
    CurrencyEntry("MZM"),
    CurrencyEntry("MZN"),
    CurrencyEntry("NAD"),
    CurrencyEntry("NGN"),
    CurrencyEntry("NIC"),
    CurrencyEntry("NIO"),
    CurrencyEntry("NLG"),
    CurrencyEntry("NOK", _CASH_ZERO),
    CurrencyEntry("NPR"),
    CurrencyEntry("NZD"),
    CurrencyEntry("OMR", _THREE),
    CurrencyEntry("PAB"),
    CurrencyEntry("PEI"),
    CurrencyEntry("PEN"),
    CurrencyEntry("PES"),
    CurrencyEntry("PGK"),
    CurrencyEntry("PHP"),
    CurrencyEntry("PKR", _CASH_ZERO),
    CurrencyEntry("PLN"),
    CurrencyEntry("PLZ"),
    CurrencyEntry("PTE"),
    CurrencyEntry("PYG", _ZERO),
    CurrencyEntry("QAR"),
    CurrencyEntry("RHD"),
    CurrencyEntry("ROL"),
    CurrencyEntry("RON"),
    CurrencyEntry("RSD", _ZERO),
    CurrencyEntry("RUB"),
    CurrencyEntry("RUR"),
    CurrencyEntry("RWF", _ZERO),
    CurrencyEntry("SAR"),
    CurrencyEntry("SBD"),
    CurrencyEntry("SCR"),
    CurrencyEntry("SDD"),
    CurrencyEntry("SDG"),
    CurrencyEntry("SDP"),
    CurrencyEntry("SEK", _CASH_ZERO),
    CurrencyEntry("SGD"),
    CurrencyEntry("SHP"),
    CurrencyEntry("SIT"),
    CurrencyEntry("SKK"),
    CurrencyEntry("SLE"),
    CurrencyEntry("SLL", _ZERO),
    CurrencyEntry("SOS", _ZERO),
    CurrencyEntry("SRD"),
    CurrencyEntry("SRG"),
    CurrencyEntry("SSP"),
    CurrencyEntry("STD", _ZERO),
    CurrencyEntry("STN"),
    CurrencyEntry("SUR"),
    CurrencyEntry("SVC"),
    CurrencyEntry("SYP", _ZERO),
    CurrencyEntry("SZL"),
    CurrencyEntry("THB"),
    CurrencyEntry("TJR"),
    CurrencyEntry("TJS"),
    CurrencyEntry("TMM", _ZERO),
    CurrencyEntry("TMT"),
    CurrencyEntry("TND", _THREE),
    CurrencyEntry("TOP"),
    CurrencyEntry("TPE"),
    CurrencyEntry("TRL", _ZERO),
    CurrencyEntry("TRY"),
    CurrencyEntry("TTD"),
    CurrencyEntry("TWD", _CASH_ZERO),
    CurrencyEntry("TZS", _CASH_ZERO),
    CurrencyEntry("UAH"),
    CurrencyEntry("UAK"),
    CurrencyEntry("UGS"),
    CurrencyEntry("UGX", _ZERO),
    CurrencyEntry("USD"),
    CurrencyEntry("USN"),
    CurrencyEntry("USS"),
    CurrencyEntry("UYI", _ZERO),
    CurrencyEntry("UYP"),
    CurrencyEntry("UYU"),
    CurrencyEntry("UYW", _FOUR),
    CurrencyEntry("UZS", _CASH_ZERO),
    CurrencyEntry("VEB"),
    CurrencyEntry("VED"),
    CurrencyEntry("VEF"),
    CurrencyEntry("VES"),
    CurrencyEntry("VND", _ZERO),
    CurrencyEntry("VNN"),
    CurrencyEntry("VUV", _ZERO),
    CurrencyEntry("WST"),
    CurrencyEntry("XAF", _ZERO),
    CurrencyEntry("XAG"),
    CurrencyEntry("XAU"),
    CurrencyEntry("XBA"),
    CurrencyEntry("XBB"),
    CurrencyEntry("XBC"),
    CurrencyEntry("XBD"),
    CurrencyEntry("XCD"),
    CurrencyEntry("XCG"),
    CurrencyEntry("XDR"),
    CurrencyEntry("XEU"),
    CurrencyEntry("XFO"),
    CurrencyEntry("XFU"),
    CurrencyEntry("XOF", _ZERO),
    CurrencyEntry("XPD"),
    CurrencyEntry("XPF", _ZERO),
    CurrencyEntry("XPT"),
    CurrencyEntry("XRE"),
    CurrencyEntry("XSU"),
    CurrencyEntry("XTS"),
    CurrencyEntry("XUA"),
    CurrencyEntry("XXX"),
    CurrencyEntry("YDD"),
    CurrencyEntry("YER", _ZERO),
    CurrencyEntry("YUD"),
    CurrencyEntry("YUM"),
    CurrencyEntry("YUN"),
    CurrencyEntry("YUR"),
    CurrencyEntry("ZAL"),
    CurrencyEntry("ZAR"),
    CurrencyEntry("ZMK", _ZERO),
    CurrencyEntry("ZMW"),
    CurrencyEntry("ZRN"),
    CurrencyEntry("ZRZ"),
    CurrencyEntry("ZWD", _ZERO),
    CurrencyEntry("ZWL"),
    CurrencyEntry("ZWR"),
)

NUM_CURRENCIES: int = 306
