"""Language to currency fallback associations.

Used only when a language tag carries no region. Each language maps to the
currency of the region it is most likely spoken in (CLDR likely subtags), so
the association is weak: Dutch is spoken in the euro area and in Suriname.
Languages without a home region (eo, ia, tlh, ...) are deliberately absent.

Sorted by language for binary search.

Python 3.13+. Zero external dependencies.
"""

from .records import LanguageCurrency

__all__ = ["LANGUAGE_CURRENCIES"]

_L = LanguageCurrency

LANGUAGE_CURRENCIES: tuple[LanguageCurrency, ...] = (
    _L("af", "ZAR"),
    _L("ak", "GHS"),
    _L("am", "ETB"),
    _L("ar", "EGP"),
    _L("as", "INR"),
    _L("ast", "EUR"),
    _L("az", "AZN"),
    _L("be", "BYN"),
    _L("bg", "BGN"),
    _L("bm", "XOF"),
    _L("bn", "BDT"),
    _L("bo", "CNY"),
    _L("br", "EUR"),
    _L("bs", "BAM"),
    _L("ca", "EUR"),
    _L("ce", "RUB"),
    _L("ceb", "PHP"),
    _L("chr", "USD"),
    _L("ckb", "IQD"),
    _L("co", "EUR"),
    _L("cs", "CZK"),
    _L("cy", "GBP"),
    _L("da", "DKK"),
    _L("de", "EUR"),
    _L("dsb", "EUR"),
    _L("dz", "BTN"),
    _L("ee", "GHS"),
    _L("el", "EUR"),
    _L("en", "USD"),
    _L("es", "EUR"),
    _L("et", "EUR"),
    _L("eu", "EUR"),
    _L("fa", "IRR"),
    _L("ff", "XOF"),
    _L("fi", "EUR"),
    _L("fil", "PHP"),
    _L("fj", "FJD"),
    _L("fo", "DKK"),
    _L("fr", "EUR"),
    _L("fur", "EUR"),
    _L("fy", "EUR"),
    _L("ga", "EUR"),
    _L("gd", "GBP"),
    _L("gl", "EUR"),
    _L("gn", "PYG"),
    _L("gsw", "CHF"),
    _L("gu", "INR"),
    _L("ha", "NGN"),
    _L("haw", "USD"),
    _L("he", "ILS"),
    _L("hi", "INR"),
    _L("hr", "EUR"),
    _L("hsb", "EUR"),
    _L("ht", "HTG"),
    _L("hu", "HUF"),
    _L("hy", "AMD"),
    _L("id", "IDR"),
    _L("ig", "NGN"),
    _L("is", "ISK"),
    _L("it", "EUR"),
    _L("ja", "JPY"),
    _L("jv", "IDR"),
    _L("ka", "GEL"),
    _L("kk", "KZT"),
    _L("kl", "DKK"),
    _L("km", "KHR"),
    _L("kn", "INR"),
    _L("ko", "KRW"),
    _L("kok", "INR"),
    _L("ks", "INR"),
    _L("ky", "KGS"),
    _L("lb", "EUR"),
    _L("lg", "UGX"),
    _L("ln", "CDF"),
    _L("lo", "LAK"),
    _L("lt", "EUR"),
    _L("lu", "CDF"),
    _L("lv", "EUR"),
    _L("mai", "INR"),
    _L("mg", "MGA"),
    _L("mi", "NZD"),
    _L("mk", "MKD"),
    _L("ml", "INR"),
    _L("mn", "MNT"),
    _L("mr", "INR"),
    _L("ms", "MYR"),
    _L("mt", "EUR"),
    _L("my", "MMK"),
    _L("nb", "NOK"),
    _L("nds", "EUR"),
    _L("ne", "NPR"),
    _L("nl", "EUR"),
    _L("nn", "NOK"),
    _L("no", "NOK"),
    _L("nso", "ZAR"),
    _L("nv", "USD"),
    _L("ny", "MWK"),
    _L("oc", "EUR"),
    _L("om", "ETB"),
    _L("or", "INR"),
    _L("os", "RUB"),
    _L("pa", "INR"),
    _L("pl", "PLN"),
    _L("ps", "AFN"),
    _L("pt", "BRL"),
    _L("qu", "PEN"),
    _L("rm", "CHF"),
    _L("rn", "BIF"),
    _L("ro", "RON"),
    _L("ru", "RUB"),
    _L("rw", "RWF"),
    _L("sa", "INR"),
    _L("sah", "RUB"),
    _L("sc", "EUR"),
    _L("sd", "PKR"),
    _L("se", "NOK"),
    _L("si", "LKR"),
    _L("sk", "EUR"),
    _L("sl", "EUR"),
    _L("sm", "WST"),
    _L("so", "SOS"),
    _L("sq", "ALL"),
    _L("sr", "RSD"),
    _L("ss", "ZAR"),
    _L("st", "ZAR"),
    _L("su", "IDR"),
    _L("sv", "SEK"),
    _L("sw", "TZS"),
    _L("ta", "INR"),
    _L("te", "INR"),
    _L("tg", "TJS"),
    _L("th", "THB"),
    _L("ti", "ETB"),
    _L("tk", "TMT"),
    _L("tn", "ZAR"),
    _L("to", "TOP"),
    _L("tr", "TRY"),
    _L("ts", "ZAR"),
    _L("tt", "RUB"),
    _L("ty", "XPF"),
    _L("ug", "CNY"),
    _L("uk", "UAH"),
    _L("ur", "PKR"),
    _L("uz", "UZS"),
    _L("ve", "ZAR"),
    _L("vi", "VND"),
    _L("wo", "XOF"),
    _L("xh", "ZAR"),
    _L("yo", "NGN"),
    _L("yue", "HKD"),
    _L("zh", "CNY"),
    _L("zu", "ZAR"),
)
