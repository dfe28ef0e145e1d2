"""Location taxonomy: countries grouped by geographic region.

``Global / Multi-region`` is a reserved group holding only the synthetic
global option; picking it means "no specific country".
"""

from __future__ import annotations

from enum import Enum

from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.model.catalog_item import CatalogItem
from workforce_intake.domain.taxonomy.taxonomy import Taxonomy


class Region(Enum):
    ASIA_PACIFIC = "Asia Pacific"
    EUROPE = "Europe"
    MIDDLE_EAST = "Middle East"
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"
    AFRICA = "Africa"
    GLOBAL = "Global / Multi-region"
    CUSTOM = "Custom"


# (name, ISO 3166-1 alpha-2 code, region)
_COUNTRIES: list[tuple[str, str, Region]] = [
    ("Afghanistan", "AF", Region.ASIA_PACIFIC),
    ("Australia", "AU", Region.ASIA_PACIFIC),
    ("Bangladesh", "BD", Region.ASIA_PACIFIC),
    ("Bhutan", "BT", Region.ASIA_PACIFIC),
    ("Brunei", "BN", Region.ASIA_PACIFIC),
    ("Cambodia", "KH", Region.ASIA_PACIFIC),
    ("China", "CN", Region.ASIA_PACIFIC),
    ("Fiji", "FJ", Region.ASIA_PACIFIC),
    ("Hong Kong", "HK", Region.ASIA_PACIFIC),
    ("India", "IN", Region.ASIA_PACIFIC),
    ("Indonesia", "ID", Region.ASIA_PACIFIC),
    ("Japan", "JP", Region.ASIA_PACIFIC),
    ("Kazakhstan", "KZ", Region.ASIA_PACIFIC),
    ("Kyrgyzstan", "KG", Region.ASIA_PACIFIC),
    ("Laos", "LA", Region.ASIA_PACIFIC),
    ("Macau", "MO", Region.ASIA_PACIFIC),
    ("Malaysia", "MY", Region.ASIA_PACIFIC),
    ("Maldives", "MV", Region.ASIA_PACIFIC),
    ("Mongolia", "MN", Region.ASIA_PACIFIC),
    ("Myanmar", "MM", Region.ASIA_PACIFIC),
    ("Nepal", "NP", Region.ASIA_PACIFIC),
    ("New Zealand", "NZ", Region.ASIA_PACIFIC),
    ("North Korea", "KP", Region.ASIA_PACIFIC),
    ("Pakistan", "PK", Region.ASIA_PACIFIC),
    ("Papua New Guinea", "PG", Region.ASIA_PACIFIC),
    ("Philippines", "PH", Region.ASIA_PACIFIC),
    ("Singapore", "SG", Region.ASIA_PACIFIC),
    ("South Korea", "KR", Region.ASIA_PACIFIC),
    ("Sri Lanka", "LK", Region.ASIA_PACIFIC),
    ("Taiwan", "TW", Region.ASIA_PACIFIC),
    ("Tajikistan", "TJ", Region.ASIA_PACIFIC),
    ("Thailand", "TH", Region.ASIA_PACIFIC),
    ("Timor-Leste", "TL", Region.ASIA_PACIFIC),
    ("Turkmenistan", "TM", Region.ASIA_PACIFIC),
    ("Uzbekistan", "UZ", Region.ASIA_PACIFIC),
    ("Vietnam", "VN", Region.ASIA_PACIFIC),

    ("Albania", "AL", Region.EUROPE),
    ("Andorra", "AD", Region.EUROPE),
    ("Armenia", "AM", Region.EUROPE),
    ("Austria", "AT", Region.EUROPE),
    ("Azerbaijan", "AZ", Region.EUROPE),
    ("Belarus", "BY", Region.EUROPE),
    ("Belgium", "BE", Region.EUROPE),
    ("Bosnia and Herzegovina", "BA", Region.EUROPE),
    ("Bulgaria", "BG", Region.EUROPE),
    ("Croatia", "HR", Region.EUROPE),
    ("Cyprus", "CY", Region.EUROPE),
    ("Czech Republic", "CZ", Region.EUROPE),
    ("Denmark", "DK", Region.EUROPE),
    ("Estonia", "EE", Region.EUROPE),
    ("Finland", "FI", Region.EUROPE),
    ("France", "FR", Region.EUROPE),
    ("Georgia", "GE", Region.EUROPE),
    ("Germany", "DE", Region.EUROPE),
    ("Greece", "GR", Region.EUROPE),
    ("Hungary", "HU", Region.EUROPE),
    ("Iceland", "IS", Region.EUROPE),
    ("Ireland", "IE", Region.EUROPE),
    ("Italy", "IT", Region.EUROPE),
    ("Kosovo", "XK", Region.EUROPE),
    ("Latvia", "LV", Region.EUROPE),
    ("Liechtenstein", "LI", Region.EUROPE),
    ("Lithuania", "LT", Region.EUROPE),
    ("Luxembourg", "LU", Region.EUROPE),
    ("Malta", "MT", Region.EUROPE),
    ("Moldova", "MD", Region.EUROPE),
    ("Monaco", "MC", Region.EUROPE),
    ("Montenegro", "ME", Region.EUROPE),
    ("Netherlands", "NL", Region.EUROPE),
    ("North Macedonia", "MK", Region.EUROPE),
    ("Norway", "NO", Region.EUROPE),
    ("Poland", "PL", Region.EUROPE),
    ("Portugal", "PT", Region.EUROPE),
    ("Romania", "RO", Region.EUROPE),
    ("Russia", "RU", Region.EUROPE),
    ("San Marino", "SM", Region.EUROPE),
    ("Serbia", "RS", Region.EUROPE),
    ("Slovakia", "SK", Region.EUROPE),
    ("Slovenia", "SI", Region.EUROPE),
    ("Spain", "ES", Region.EUROPE),
    ("Sweden", "SE", Region.EUROPE),
    ("Switzerland", "CH", Region.EUROPE),
    ("Ukraine", "UA", Region.EUROPE),
    ("United Kingdom", "GB", Region.EUROPE),
    ("Vatican City", "VA", Region.EUROPE),

    ("Bahrain", "BH", Region.MIDDLE_EAST),
    ("Egypt", "EG", Region.MIDDLE_EAST),
    ("Iran", "IR", Region.MIDDLE_EAST),
    ("Iraq", "IQ", Region.MIDDLE_EAST),
    ("Israel", "IL", Region.MIDDLE_EAST),
    ("Jordan", "JO", Region.MIDDLE_EAST),
    ("Kuwait", "KW", Region.MIDDLE_EAST),
    ("Lebanon", "LB", Region.MIDDLE_EAST),
    ("Oman", "OM", Region.MIDDLE_EAST),
    ("Palestine", "PS", Region.MIDDLE_EAST),
    ("Qatar", "QA", Region.MIDDLE_EAST),
    ("Saudi Arabia", "SA", Region.MIDDLE_EAST),
    ("Syria", "SY", Region.MIDDLE_EAST),
    ("Turkey", "TR", Region.MIDDLE_EAST),
    ("United Arab Emirates", "AE", Region.MIDDLE_EAST),
    ("Yemen", "YE", Region.MIDDLE_EAST),

    ("Antigua and Barbuda", "AG", Region.NORTH_AMERICA),
    ("Bahamas", "BS", Region.NORTH_AMERICA),
    ("Barbados", "BB", Region.NORTH_AMERICA),
    ("Belize", "BZ", Region.NORTH_AMERICA),
    ("Canada", "CA", Region.NORTH_AMERICA),
    ("Costa Rica", "CR", Region.NORTH_AMERICA),
    ("Cuba", "CU", Region.NORTH_AMERICA),
    ("Dominica", "DM", Region.NORTH_AMERICA),
    ("Dominican Republic", "DO", Region.NORTH_AMERICA),
    ("El Salvador", "SV", Region.NORTH_AMERICA),
    ("Grenada", "GD", Region.NORTH_AMERICA),
    ("Guatemala", "GT", Region.NORTH_AMERICA),
    ("Haiti", "HT", Region.NORTH_AMERICA),
    ("Honduras", "HN", Region.NORTH_AMERICA),
    ("Jamaica", "JM", Region.NORTH_AMERICA),
    ("Mexico", "MX", Region.NORTH_AMERICA),
    ("Nicaragua", "NI", Region.NORTH_AMERICA),
    ("Panama", "PA", Region.NORTH_AMERICA),
    ("Saint Kitts and Nevis", "KN", Region.NORTH_AMERICA),
    ("Saint Lucia", "LC", Region.NORTH_AMERICA),
    ("Saint Vincent and the Grenadines", "VC", Region.NORTH_AMERICA),
    ("Trinidad and Tobago", "TT", Region.NORTH_AMERICA),
    ("United States", "US", Region.NORTH_AMERICA),

    ("Argentina", "AR", Region.SOUTH_AMERICA),
    ("Bolivia", "BO", Region.SOUTH_AMERICA),
    ("Brazil", "BR", Region.SOUTH_AMERICA),
    ("Chile", "CL", Region.SOUTH_AMERICA),
    ("Colombia", "CO", Region.SOUTH_AMERICA),
    ("Ecuador", "EC", Region.SOUTH_AMERICA),
    ("Guyana", "GY", Region.SOUTH_AMERICA),
    ("Paraguay", "PY", Region.SOUTH_AMERICA),
    ("Peru", "PE", Region.SOUTH_AMERICA),
    ("Suriname", "SR", Region.SOUTH_AMERICA),
    ("Uruguay", "UY", Region.SOUTH_AMERICA),
    ("Venezuela", "VE", Region.SOUTH_AMERICA),

    ("Algeria", "DZ", Region.AFRICA),
    ("Angola", "AO", Region.AFRICA),
    ("Benin", "BJ", Region.AFRICA),
    ("Botswana", "BW", Region.AFRICA),
    ("Burkina Faso", "BF", Region.AFRICA),
    ("Burundi", "BI", Region.AFRICA),
    ("Cameroon", "CM", Region.AFRICA),
    ("Cape Verde", "CV", Region.AFRICA),
    ("Central African Republic", "CF", Region.AFRICA),
    ("Chad", "TD", Region.AFRICA),
    ("Comoros", "KM", Region.AFRICA),
    ("Congo", "CG", Region.AFRICA),
    ("Democratic Republic of the Congo", "CD", Region.AFRICA),
    ("Djibouti", "DJ", Region.AFRICA),
    ("Equatorial Guinea", "GQ", Region.AFRICA),
    ("Eritrea", "ER", Region.AFRICA),
    ("Eswatini", "SZ", Region.AFRICA),
    ("Ethiopia", "ET", Region.AFRICA),
    ("Gabon", "GA", Region.AFRICA),
    ("Gambia", "GM", Region.AFRICA),
    ("Ghana", "GH", Region.AFRICA),
    ("Guinea", "GN", Region.AFRICA),
    ("Guinea-Bissau", "GW", Region.AFRICA),
    ("Ivory Coast", "CI", Region.AFRICA),
    ("Kenya", "KE", Region.AFRICA),
    ("Lesotho", "LS", Region.AFRICA),
    ("Liberia", "LR", Region.AFRICA),
    ("Libya", "LY", Region.AFRICA),
    ("Madagascar", "MG", Region.AFRICA),
    ("Malawi", "MW", Region.AFRICA),
    ("Mali", "ML", Region.AFRICA),
    ("Mauritania", "MR", Region.AFRICA),
    ("Mauritius", "MU", Region.AFRICA),
    ("Morocco", "MA", Region.AFRICA),
    ("Mozambique", "MZ", Region.AFRICA),
    ("Namibia", "NA", Region.AFRICA),
    ("Niger", "NE", Region.AFRICA),
    ("Nigeria", "NG", Region.AFRICA),
    ("Rwanda", "RW", Region.AFRICA),
    ("Sao Tome and Principe", "ST", Region.AFRICA),
    ("Senegal", "SN", Region.AFRICA),
    ("Seychelles", "SC", Region.AFRICA),
    ("Sierra Leone", "SL", Region.AFRICA),
    ("Somalia", "SO", Region.AFRICA),
    ("South Africa", "ZA", Region.AFRICA),
    ("South Sudan", "SS", Region.AFRICA),
    ("Sudan", "SD", Region.AFRICA),
    ("Tanzania", "TZ", Region.AFRICA),
    ("Togo", "TG", Region.AFRICA),
    ("Tunisia", "TN", Region.AFRICA),
    ("Uganda", "UG", Region.AFRICA),
    ("Zambia", "ZM", Region.AFRICA),
    ("Zimbabwe", "ZW", Region.AFRICA),
]

LOCATION_TAXONOMY = Taxonomy(
    groups=tuple(Region),
    items=tuple(
        CatalogItem(name=name, group=region, code=code)
        for name, code, region in _COUNTRIES
    ),
)

GLOBAL_MULTI_REGION_OPTION = CatalogItem(
    name=Region.GLOBAL.value,
    group=Region.GLOBAL,
)

LOCATION_DOMAIN = CatalogDomain(
    key="locations",
    label="country",
    group_type=Region,
    taxonomy=LOCATION_TAXONOMY,
    custom_group=Region.CUSTOM,
    global_option=GLOBAL_MULTI_REGION_OPTION,
    placeholder="Select Country / Location...",
)
