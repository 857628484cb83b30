"""Region to currency associations.

Rows are grouped by region (sorted by region code) and, inside a region,
listed canonical entry first: the first row valid at a given date wins, so
order inside a group is significant.

Dates follow CLDR supplemental currencyData; valid_to is the last day of use.
Dependent territories are plain rows pointing at the parent territory's
currency (AC, TA, DG, ...). AQ and CP carry an explicit non-tender XXX row:
they deliberately have no currency, which differs from being absent.

Python 3.13+. Zero external dependencies.
"""

from datetime import date

from .records import RegionCurrency

__all__ = ["REGION_CURRENCIES"]

_R = RegionCurrency

REGION_CURRENCIES: tuple[RegionCurrency, ...] = (
    _R("AC", "SHP", date(1976, 1, 1)),
    _R("AD", "EUR", date(1999, 1, 1)),
    _R("AD", "ESP", date(1873, 1, 1), date(2002, 2, 28)),
    _R("AD", "ADP", date(1936, 1, 1), date(2001, 12, 31)),
    _R("AD", "FRF", date(1960, 1, 1), date(2002, 2, 17)),
    _R("AE", "AED", date(1973, 5, 19)),
    _R("AF", "AFN", date(2002, 10, 7)),
    _R("AF", "AFA", date(1927, 3, 14), date(2002, 12, 31)),
    _R("AG", "XCD", date(1965, 10, 6)),
    _R("AI", "XCD", date(1965, 10, 6)),
    _R("AL", "ALL", date(1965, 8, 16)),
    _R("AL", "ALK", date(1946, 11, 1), date(1965, 8, 16)),
    _R("AM", "AMD", date(1993, 11, 22)),
    _R("AM", "RUR", date(1991, 12, 25), date(1993, 11, 22)),
    _R("AM", "SUR", date(1961, 1, 1), date(1991, 12, 25)),
    _R("AO", "AOA", date(1999, 12, 13)),
    _R("AO", "AOR", date(1995, 7, 1), date(2000, 2, 1)),
    _R("AO", "AON", date(1990, 9, 25), date(2000, 2, 1)),
    _R("AO", "AOK", date(1977, 1, 8), date(1991, 3, 1)),
    _R("AQ", "XXX", None, None, tender=False),
    _R("AR", "ARS", date(1992, 1, 1)),
    _R("AR", "ARA", date(1985, 6, 14), date(1992, 1, 1)),
    _R("AR", "ARP", date(1983, 6, 1), date(1985, 6, 14)),
    _R("AR", "ARM", date(1881, 11, 5), date(1970, 1, 1)),
    _R("AR", "ARL", date(1970, 1, 1), date(1983, 6, 1)),
    _R("AS", "USD", date(1904, 2, 16)),
    _R("AT", "EUR", date(1999, 1, 1)),
    _R("AT", "ATS", date(1947, 12, 4), date(2002, 2, 28)),
    _R("AU", "AUD", date(1966, 2, 14)),
    _R("AW", "AWG", date(1986, 1, 1)),
    _R("AX", "EUR", date(1999, 1, 1)),
    _R("AZ", "AZN", date(2006, 1, 1)),
    _R("AZ", "AZM", date(1993, 11, 22), date(2006, 12, 31)),
    _R("BA", "BAM", date(1995, 1, 1)),
    _R("BA", "BAN", date(1994, 8, 15), date(1997, 7, 1)),
    _R("BA", "BAD", date(1992, 7, 1), date(1994, 8, 15)),
    _R("BB", "BBD", date(1973, 12, 3)),
    _R("BD", "BDT", date(1972, 1, 1)),
    _R("BE", "EUR", date(1999, 1, 1)),
    _R("BE", "BEF", date(1831, 2, 7), date(2002, 2, 28)),
    _R("BE", "BEC", date(1970, 1, 1), date(1990, 3, 5), tender=False),
    _R("BE", "BEL", date(1970, 1, 1), date(1990, 3, 5), tender=False),
    _R("BF", "XOF", date(1984, 8, 4)),
    _R("BG", "BGN", date(1999, 7, 5)),
    _R("BG", "BGL", date(1962, 1, 1), date(1999, 7, 5)),
    _R("BG", "BGM", date(1952, 5, 12), date(1962, 1, 1)),
    _R("BG", "BGO", date(1879, 7, 8), date(1952, 5, 12)),
    _R("BH", "BHD", date(1965, 10, 16)),
    _R("BI", "BIF", date(1964, 5, 19)),
    _R("BJ", "XOF", date(1975, 11, 30)),
    _R("BL", "EUR", date(1999, 1, 1)),
    _R("BM", "BMD", date(1970, 2, 6)),
    _R("BN", "BND", date(1967, 6, 12)),
    _R("BO", "BOB", date(1987, 1, 1)),
    _R("BO", "BOV", None, None, tender=False),
    _R("BO", "BOP", date(1963, 1, 1), date(1986, 12, 31)),
    _R("BO", "BOL", date(1863, 6, 1), date(1963, 1, 1)),
    _R("BQ", "USD", date(2011, 1, 1)),
    _R("BR", "BRL", date(1994, 7, 1)),
    _R("BR", "BRR", date(1993, 8, 1), date(1994, 7, 1)),
    _R("BR", "BRE", date(1990, 3, 16), date(1993, 8, 1)),
    _R("BR", "BRN", date(1989, 1, 15), date(1990, 3, 16)),
    _R("BR", "BRZ", date(1986, 3, 1), date(1989, 1, 15)),
    _R("BR", "BRC", date(1986, 2, 28), date(1989, 1, 15)),
    _R("BR", "BRB", date(1967, 2, 13), date(1986, 2, 28)),
    _R("BS", "BSD", date(1966, 5, 25)),
    _R("BT", "BTN", date(1974, 4, 16)),
    _R("BT", "INR", date(1907, 1, 1)),
    _R("BU", "BUK", date(1952, 7, 1), date(1989, 6, 18)),
    _R("BV", "NOK", date(1905, 6, 7)),
    _R("BW", "BWP", date(1976, 8, 23)),
    _R("BY", "BYN", date(2016, 7, 1)),
    _R("BY", "BYR", date(2000, 1, 1), date(2016, 12, 31)),
    _R("BY", "BYB", date(1994, 8, 1), date(2000, 12, 31)),
    _R("BZ", "BZD", date(1974, 1, 1)),
    _R("CA", "CAD", date(1858, 1, 1)),
    _R("CC", "AUD", date(1966, 2, 14)),
    _R("CD", "CDF", date(1998, 7, 1)),
    _R("CF", "XAF", date(1993, 1, 1)),
    _R("CG", "XAF", date(1993, 1, 1)),
    _R("CH", "CHF", date(1799, 3, 17)),
    _R("CH", "CHE", date(1979, 1, 1), None, tender=False),
    _R("CH", "CHW", date(1979, 1, 1), None, tender=False),
    _R("CI", "XOF", date(1958, 12, 4)),
    _R("CK", "NZD", date(1967, 7, 10)),
    _R("CL", "CLP", date(1975, 9, 29)),
    _R("CL", "CLF", None, None, tender=False),
    _R("CL", "CLE", date(1960, 1, 1), date(1975, 9, 29)),
    _R("CM", "XAF", date(1973, 4, 1)),
    _R("CN", "CNY", date(1953, 3, 1)),
    _R("CN", "CNH", date(2010, 7, 19), None, tender=False),
    _R("CN", "CNX", date(1979, 1, 1), date(1998, 12, 31), tender=False),
    _R("CO", "COP", date(1905, 1, 1)),
    _R("CO", "COU", date(2000, 1, 1), None, tender=False),
    _R("CP", "XXX", None, None, tender=False),
    _R("CR", "CRC", date(1896, 10, 26)),
    _R("CS", "CSD", date(2002, 5, 15), date(2006, 6, 3)),
    _R("CS", "YUM", date(1994, 1, 24), date(2002, 5, 15)),
    _R("CU", "CUP", date(1859, 1, 1)),
    _R("CU", "CUC", date(1994, 1, 1)),
    _R("CU", "USD", date(1899, 1, 1), date(1959, 1, 1)),
    _R("CV", "CVE", date(1914, 1, 1)),
    _R("CV", "PTE", date(1911, 5, 22), date(1975, 7, 5)),
    _R("CW", "ANG", date(2010, 10, 10)),
    _R("CX", "AUD", date(1966, 2, 14)),
    _R("CY", "EUR", date(2008, 1, 1)),
    _R("CY", "CYP", date(1914, 9, 10), date(2008, 1, 31)),
    _R("CZ", "CZK", date(1993, 1, 1)),
    _R("CZ", "CSK", date(1953, 6, 1), date(1993, 3, 1)),
    _R("DD", "DDM", date(1948, 7, 20), date(1990, 10, 2)),
    _R("DE", "EUR", date(1999, 1, 1)),
    _R("DE", "DEM", date(1948, 6, 20), date(2002, 2, 28)),
    _R("DG", "USD", date(1965, 11, 8)),
    _R("DJ", "DJF", date(1977, 6, 27)),
    _R("DK", "DKK", date(1873, 5, 27)),
    _R("DM", "XCD", date(1965, 10, 6)),
    _R("DO", "DOP", date(1947, 10, 1)),
    _R("DZ", "DZD", date(1964, 4, 1)),
    _R("EA", "EUR", date(1999, 1, 1)),
    _R("EC", "USD", date(2000, 10, 2)),
    _R("EC", "ECS", date(1884, 4, 1), date(2000, 10, 2)),
    _R("EC", "ECV", date(1993, 5, 23), date(2000, 1, 9), tender=False),
    _R("EE", "EUR", date(2011, 1, 1)),
    _R("EE", "EEK", date(1992, 6, 21), date(2010, 12, 31)),
    _R("EG", "EGP", date(1885, 11, 14)),
    _R("EH", "MAD", date(1976, 2, 26)),
    _R("ER", "ERN", date(1997, 11, 8)),
    _R("ES", "EUR", date(1999, 1, 1)),
    _R("ES", "ESP", date(1868, 10, 19), date(2002, 2, 28)),
    _R("ES", "ESA", date(1978, 1, 1), date(1981, 12, 31), tender=False),
    _R("ES", "ESB", date(1975, 1, 1), date(1994, 12, 31), tender=False),
    _R("ET", "ETB", date(1976, 9, 15)),
    _R("EU", "EUR", date(1999, 1, 1)),
    _R("EU", "XEU", date(1979, 1, 1), date(1998, 12, 31), tender=False),
    _R("FI", "EUR", date(1999, 1, 1)),
    _R("FI", "FIM", date(1963, 1, 1), date(2002, 2, 28)),
    _R("FJ", "FJD", date(1969, 1, 13)),
    _R("FK", "FKP", date(1901, 1, 1)),
    _R("FM", "USD", date(1944, 1, 1)),
    _R("FO", "DKK", date(1948, 1, 1)),
    _R("FR", "EUR", date(1999, 1, 1)),
    _R("FR", "FRF", date(1960, 1, 1), date(2002, 2, 17)),
    _R("GA", "XAF", date(1993, 1, 1)),
    _R("GB", "GBP", date(1694, 7, 27)),
    _R("GD", "XCD", date(1967, 2, 27)),
    _R("GE", "GEL", date(1995, 9, 23)),
    _R("GE", "GEK", date(1993, 4, 5), date(1995, 9, 25)),
    _R("GF", "EUR", date(1999, 1, 1)),
    _R("GG", "GBP", date(1830, 1, 1)),
    _R("GH", "GHS", date(2007, 7, 3)),
    _R("GH", "GHC", date(1979, 3, 9), date(2007, 12, 31)),
    _R("GI", "GIP", date(1713, 1, 1)),
    _R("GL", "DKK", date(1873, 5, 27)),
    _R("GM", "GMD", date(1971, 7, 1)),
    _R("GN", "GNF", date(1986, 1, 6)),
    _R("GN", "GNS", date(1972, 10, 2), date(1986, 1, 6)),
    _R("GP", "EUR", date(1999, 1, 1)),
    _R("GQ", "XAF", date(1993, 1, 1)),
    _R("GQ", "GQE", date(1975, 7, 7), date(1986, 6, 1)),
    _R("GR", "EUR", date(2001, 1, 1)),
    _R("GR", "GRD", date(1954, 5, 1), date(2002, 2, 28)),
    _R("GS", "GBP", date(1908, 1, 1)),
    _R("GT", "GTQ", date(1925, 5, 27)),
    _R("GU", "USD", date(1944, 8, 21)),
    _R("GW", "XOF", date(1997, 3, 31)),
    _R("GW", "GWP", date(1976, 2, 28), date(1997, 3, 31)),
    _R("GW", "GWE", date(1914, 1, 1), date(1976, 2, 28)),
    _R("GY", "GYD", date(1966, 5, 26)),
    _R("HK", "HKD", date(1895, 2, 2)),
    _R("HM", "AUD", date(1967, 2, 16)),
    _R("HN", "HNL", date(1926, 4, 3)),
    _R("HR", "EUR", date(2023, 1, 1)),
    _R("HR", "HRK", date(1994, 5, 30), date(2023, 1, 14)),
    _R("HR", "HRD", date(1991, 12, 23), date(1995, 1, 1)),
    _R("HT", "HTG", date(1872, 8, 26)),
    _R("HT", "USD", date(1915, 1, 1)),
    _R("HU", "HUF", date(1946, 7, 23)),
    _R("IC", "EUR", date(1999, 1, 1)),
    _R("ID", "IDR", date(1965, 12, 13)),
    _R("IE", "EUR", date(1999, 1, 1)),
    _R("IE", "IEP", date(1922, 1, 1), date(2002, 2, 9)),
    _R("IL", "ILS", date(1985, 9, 4)),
    _R("IL", "ILP", date(1948, 8, 16), date(1980, 2, 22)),
    _R("IL", "ILR", date(1980, 2, 22), date(1985, 9, 4)),
    _R("IM", "GBP", date(1840, 1, 3)),
    _R("IN", "INR", date(1835, 8, 17)),
    _R("IO", "USD", date(1965, 11, 8)),
    _R("IQ", "IQD", date(1931, 4, 19)),
    _R("IR", "IRR", date(1932, 5, 13)),
    _R("IS", "ISK", date(1981, 1, 1)),
    _R("IS", "ISJ", date(1918, 12, 1), date(1981, 1, 1)),
    _R("IT", "EUR", date(1999, 1, 1)),
    _R("IT", "ITL", date(1862, 8, 24), date(2002, 2, 28)),
    _R("JE", "GBP", date(1837, 1, 1)),
    _R("JM", "JMD", date(1969, 9, 8)),
    _R("JO", "JOD", date(1950, 7, 1)),
    _R("JP", "JPY", date(1871, 6, 1)),
    _R("KE", "KES", date(1966, 9, 14)),
    _R("KG", "KGS", date(1993, 5, 10)),
    _R("KH", "KHR", date(1980, 3, 20)),
    _R("KI", "AUD", date(1966, 2, 14)),
    _R("KM", "KMF", date(1975, 7, 6)),
    _R("KN", "XCD", date(1965, 10, 6)),
    _R("KP", "KPW", date(1959, 4, 17)),
    _R("KR", "KRW", date(1962, 6, 10)),
    _R("KR", "KRH", date(1953, 2, 15), date(1962, 6, 10)),
    _R("KR", "KRO", date(1945, 8, 15), date(1953, 2, 15)),
    _R("KW", "KWD", date(1961, 4, 1)),
    _R("KY", "KYD", date(1971, 1, 1)),
    _R("KZ", "KZT", date(1993, 11, 5)),
    _R("LA", "LAK", date(1979, 12, 10)),
    _R("LB", "LBP", date(1948, 2, 2)),
    _R("LC", "XCD", date(1965, 10, 6)),
    _R("LI", "CHF", date(1921, 2, 1)),
    _R("LK", "LKR", date(1978, 5, 22)),
    _R("LR", "LRD", date(1944, 1, 1)),
    _R("LS", "ZAR", date(1961, 2, 14)),
    _R("LS", "LSL", date(1980, 1, 22)),
    _R("LT", "EUR", date(2015, 1, 1)),
    _R("LT", "LTL", date(1993, 6, 25), date(2014, 12, 31)),
    _R("LT", "LTT", date(1992, 10, 1), date(1993, 6, 25)),
    _R("LU", "EUR", date(1999, 1, 1)),
    _R("LU", "LUF", date(1944, 9, 4), date(2002, 2, 28)),
    _R("LU", "LUC", date(1970, 1, 1), date(1990, 3, 5), tender=False),
    _R("LU", "LUL", date(1970, 1, 1), date(1990, 3, 5), tender=False),
    _R("LV", "EUR", date(2014, 1, 1)),
    _R("LV", "LVL", date(1993, 6, 28), date(2013, 12, 31)),
    _R("LV", "LVR", date(1992, 5, 7), date(1993, 10, 17)),
    _R("LY", "LYD", date(1971, 9, 1)),
    _R("MA", "MAD", date(1959, 10, 17)),
    _R("MA", "MAF", date(1881, 1, 1), date(1959, 10, 17)),
    _R("MC", "EUR", date(1999, 1, 1)),
    _R("MC", "MCF", date(1960, 1, 1), date(2002, 2, 17)),
    _R("MD", "MDL", date(1993, 11, 29)),
    _R("MD", "MDC", date(1992, 6, 1), date(1993, 11, 29)),
    _R("ME", "EUR", date(2002, 1, 1)),
    _R("MF", "EUR", date(1999, 1, 1)),
    _R("MG", "MGA", date(1983, 11, 1)),
    _R("MG", "MGF", date(1963, 7, 1), date(2004, 12, 31)),
    _R("MH", "USD", date(1944, 1, 1)),
    _R("MK", "MKD", date(1993, 5, 20)),
    _R("MK", "MKN", date(1992, 4, 26), date(1993, 5, 20)),
    _R("ML", "XOF", date(1984, 6, 1)),
    _R("ML", "MLF", date(1962, 7, 2), date(1984, 8, 31)),
    _R("MM", "MMK", date(1989, 6, 18)),
    _R("MN", "MNT", date(1915, 3, 2)),
    _R("MO", "MOP", date(1901, 1, 1)),
    _R("MP", "USD", date(1944, 1, 1)),
    _R("MQ", "EUR", date(1999, 1, 1)),
    _R("MR", "MRU", date(2018, 1, 1)),
    _R("MR", "MRO", date(1973, 6, 29), date(2018, 6, 30)),
    _R("MS", "XCD", date(1967, 2, 27)),
    _R("MT", "EUR", date(2008, 1, 1)),
    _R("MT", "MTL", date(1968, 6, 7), date(2008, 1, 31)),
    _R("MT", "MTP", date(1914, 8, 13), date(1968, 6, 7)),
    _R("MU", "MUR", date(1934, 4, 1)),
    _R("MV", "MVR", date(1981, 7, 1)),
    _R("MV", "MVP", date(1947, 1, 1), date(1981, 7, 1)),
    _R("MW", "MWK", date(1971, 2, 15)),
    _R("MX", "MXN", date(1993, 1, 1)),
    _R("MX", "MXV", None, None, tender=False),
    _R("MX", "MXP", date(1822, 1, 1), date(1992, 12, 31)),
    _R("MY", "MYR", date(1963, 9, 16)),
    _R("MZ", "MZN", date(2006, 7, 1)),
    _R("MZ", "MZM", date(1980, 6, 16), date(2006, 12, 31)),
    _R("MZ", "MZE", date(1975, 6, 25), date(1980, 6, 16)),
    _R("NA", "NAD", date(1993, 1, 1)),
    _R("NA", "ZAR", date(1961, 2, 14)),
    _R("NC", "XPF", date(1985, 1, 1)),
    _R("NE", "XOF", date(1958, 12, 19)),
    _R("NF", "AUD", date(1966, 2, 14)),
    _R("NG", "NGN", date(1973, 1, 1)),
    _R("NI", "NIO", date(1991, 4, 30)),
    _R("NI", "NIC", date(1988, 2, 15), date(1991, 4, 30)),
    _R("NL", "EUR", date(1999, 1, 1)),
    _R("NL", "NLG", date(1813, 1, 1), date(2002, 2, 28)),
    _R("NO", "NOK", date(1905, 6, 7)),
    _R("NP", "NPR", date(1933, 1, 1)),
    _R("NR", "AUD", date(1966, 2, 14)),
    _R("NU", "NZD", date(1967, 7, 10)),
    _R("NZ", "NZD", date(1967, 7, 10)),
    _R("OM", "OMR", date(1972, 11, 11)),
    _R("PA", "PAB", date(1903, 11, 4)),
    _R("PA", "USD", date(1903, 11, 18)),
    _R("PE", "PEN", date(1991, 7, 1)),
    _R("PE", "PEI", date(1985, 2, 1), date(1991, 7, 1)),
    _R("PE", "PES", date(1863, 2, 14), date(1985, 2, 1)),
    _R("PF", "XPF", date(1945, 12, 26)),
    _R("PG", "PGK", date(1975, 9, 16)),
    _R("PG", "AUD", date(1966, 2, 14), date(1975, 9, 16)),
    _R("PH", "PHP", date(1946, 7, 4)),
    _R("PK", "PKR", date(1948, 1, 1)),
    _R("PL", "PLN", date(1995, 1, 1)),
    _R("PL", "PLZ", date(1950, 10, 28), date(1994, 12, 31)),
    _R("PM", "EUR", date(2002, 1, 1)),
    _R("PN", "NZD", date(1969, 1, 13)),
    _R("PR", "USD", date(1898, 12, 10)),
    _R("PS", "ILS", date(1985, 9, 4)),
    _R("PS", "JOD", date(1996, 2, 12)),
    _R("PT", "EUR", date(1999, 1, 1)),
    _R("PT", "PTE", date(1911, 5, 22), date(2002, 2, 28)),
    _R("PW", "USD", date(1944, 1, 1)),
    _R("PY", "PYG", date(1943, 11, 1)),
    _R("QA", "QAR", date(1973, 5, 19)),
    _R("RE", "EUR", date(1999, 1, 1)),
    _R("RO", "RON", date(2005, 7, 1)),
    _R("RO", "ROL", date(1952, 1, 28), date(2006, 12, 31)),
    _R("RS", "RSD", date(2006, 10, 25)),
    _R("RS", "CSD", date(2002, 5, 15), date(2006, 10, 25)),
    _R("RU", "RUB", date(1999, 1, 1)),
    _R("RU", "RUR", date(1991, 12, 25), date(1998, 12, 31)),
    _R("RW", "RWF", date(1964, 5, 19)),
    _R("SA", "SAR", date(1952, 10, 22)),
    _R("SB", "SBD", date(1977, 1, 24)),
    _R("SC", "SCR", date(1903, 11, 1)),
    _R("SD", "SDG", date(2007, 1, 10)),
    _R("SD", "SDD", date(1992, 6, 8), date(2007, 6, 30)),
    _R("SD", "SDP", date(1957, 4, 8), date(1998, 6, 1)),
    _R("SE", "SEK", date(1873, 5, 27)),
    _R("SG", "SGD", date(1967, 6, 12)),
    _R("SH", "SHP", date(1917, 2, 15)),
    _R("SI", "EUR", date(2007, 1, 1)),
    _R("SI", "SIT", date(1992, 10, 7), date(2007, 1, 14)),
    _R("SJ", "NOK", date(1905, 6, 7)),
    _R("SK", "EUR", date(2009, 1, 1)),
    _R("SK", "SKK", date(1992, 12, 31), date(2009, 1, 1)),
    _R("SL", "SLE", date(2022, 7, 1)),
    _R("SL", "SLL", date(1964, 8, 4)),
    _R("SM", "EUR", date(1999, 1, 1)),
    _R("SM", "ITL", date(1862, 8, 24), date(2002, 2, 28)),
    _R("SN", "XOF", date(1959, 4, 4)),
    _R("SO", "SOS", date(1960, 7, 1)),
    _R("SR", "SRD", date(2004, 1, 1)),
    _R("SR", "SRG", date(1940, 1, 1), date(2003, 12, 31)),
    _R("SS", "SSP", date(2011, 7, 18)),
    _R("ST", "STN", date(2018, 1, 1)),
    _R("ST", "STD", date(1977, 9, 8), date(2018, 3, 31)),
    _R("SU", "SUR", date(1961, 1, 1), date(1991, 12, 25)),
    _R("SV", "USD", date(2001, 1, 1)),
    _R("SV", "SVC", date(1919, 11, 11), date(2001, 1, 1)),
    _R("SX", "ANG", date(2010, 10, 10)),
    _R("SY", "SYP", date(1948, 1, 1)),
    _R("SZ", "SZL", date(1974, 9, 6)),
    _R("TA", "GBP", date(1938, 1, 12)),
    _R("TC", "USD", date(1969, 9, 8)),
    _R("TD", "XAF", date(1993, 1, 1)),
    _R("TF", "EUR", date(1999, 1, 1)),
    _R("TG", "XOF", date(1958, 11, 28)),
    _R("TH", "THB", date(1928, 4, 15)),
    _R("TJ", "TJS", date(2000, 10, 26)),
    _R("TJ", "TJR", date(1995, 5, 10), date(2000, 10, 25)),
    _R("TK", "NZD", date(1967, 7, 10)),
    _R("TL", "USD", date(1999, 10, 20)),
    _R("TL", "TPE", date(1959, 1, 2), date(2002, 5, 20)),
    _R("TL", "IDR", date(1975, 12, 7), date(2002, 5, 20)),
    _R("TM", "TMT", date(2009, 1, 1)),
    _R("TM", "TMM", date(1993, 11, 1), date(2009, 1, 1)),
    _R("TN", "TND", date(1958, 11, 1)),
    _R("TO", "TOP", date(1966, 2, 14)),
    _R("TP", "TPE", date(1959, 1, 2), date(2002, 5, 20)),
    _R("TP", "IDR", date(1975, 12, 7), date(2002, 5, 20)),
    _R("TR", "TRY", date(2005, 1, 1)),
    _R("TR", "TRL", date(1922, 11, 1), date(2005, 12, 31)),
    _R("TT", "TTD", date(1964, 1, 1)),
    _R("TV", "AUD", date(1966, 2, 14)),
    _R("TW", "TWD", date(1949, 6, 15)),
    _R("TZ", "TZS", date(1966, 6, 14)),
    _R("UA", "UAH", date(1996, 9, 2)),
    _R("UA", "UAK", date(1992, 11, 13), date(1993, 10, 17)),
    _R("UG", "UGX", date(1987, 5, 15)),
    _R("UG", "UGS", date(1966, 8, 15), date(1987, 5, 15)),
    _R("UM", "USD", date(1944, 1, 1)),
    _R("US", "USD", date(1792, 1, 1)),
    _R("US", "USN", None, None, tender=False),
    _R("US", "USS", None, date(2014, 3, 1), tender=False),
    _R("UY", "UYU", date(1993, 3, 1)),
    _R("UY", "UYI", None, None, tender=False),
    _R("UY", "UYW", None, None, tender=False),
    _R("UY", "UYP", date(1975, 7, 1), date(1993, 3, 1)),
    _R("UZ", "UZS", date(1994, 7, 1)),
    _R("VA", "EUR", date(1999, 1, 1)),
    _R("VA", "ITL", date(1870, 10, 19), date(2002, 2, 28)),
    _R("VC", "XCD", date(1965, 10, 6)),
    _R("VE", "VES", date(2018, 8, 20)),
    _R("VE", "VED", date(2021, 10, 1), None, tender=False),
    _R("VE", "VEF", date(2008, 1, 1), date(2018, 8, 20)),
    _R("VE", "VEB", date(1871, 5, 11), date(2008, 6, 30)),
    _R("VG", "USD", date(1833, 1, 1)),
    _R("VG", "GBP", date(1833, 1, 1), date(1959, 1, 1)),
    _R("VI", "USD", date(1837, 1, 1)),
    _R("VN", "VND", date(1985, 9, 14)),
    _R("VN", "VNN", date(1978, 5, 3), date(1985, 9, 14)),
    _R("VU", "VUV", date(1981, 1, 1)),
    _R("WF", "XPF", date(1961, 7, 30)),
    _R("WS", "WST", date(1967, 7, 10)),
    _R("XK", "EUR", date(2002, 1, 1)),
    _R("XK", "DEM", date(1999, 9, 1), date(2002, 3, 9)),
    _R("YD", "YDD", date(1965, 4, 1), date(1996, 1, 1)),
    _R("YE", "YER", date(1990, 5, 22)),
    _R("YT", "EUR", date(1999, 1, 1)),
    _R("YU", "YUM", date(1994, 1, 24), date(2002, 5, 15)),
    _R("YU", "YUN", date(1990, 1, 1), date(1992, 7, 24)),
    _R("YU", "YUD", date(1966, 1, 1), date(1990, 1, 1)),
    _R("ZA", "ZAR", date(1961, 2, 14)),
    _R("ZA", "ZAL", date(1985, 9, 1), date(1995, 3, 13), tender=False),
    _R("ZM", "ZMW", date(2013, 1, 1)),
    _R("ZM", "ZMK", date(1968, 1, 16), date(2013, 1, 1)),
    _R("ZR", "ZRN", date(1993, 11, 1), date(1998, 7, 31)),
    _R("ZR", "ZRZ", date(1971, 10, 27), date(1993, 11, 1)),
    _R("ZW", "USD", date(2009, 4, 12)),
    _R("ZW", "ZWL", date(2009, 2, 2), date(2009, 4, 12)),
    _R("ZW", "ZWR", date(2008, 5, 1), date(2009, 2, 2)),
    _R("ZW", "ZWD", date(1980, 4, 18), date(2008, 8, 1)),
    _R("ZW", "RHD", date(1970, 2, 17), date(1980, 4, 18)),
)
