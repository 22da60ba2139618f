"""Star name pool for generated galaxies.

Names are drawn from a fixed catalogue of proper star names plus Bayer-style
designations (a Greek letter followed by a constellation genitive). Every
designation also has lettered companions ("Alpha Lyrae B") so the pool covers
galaxies of a few thousand stars. The catalogue is shuffled with the
generation RNG so the same seed always names stars the same way.
"""

from .rng import GameRNG

PROPER_NAMES = [
    "Achernar",
    "Acrux",
    "Adhara",
    "Albireo",
    "Alcor",
    "Aldebaran",
    "Algol",
    "Alnilam",
    "Alphard",
    "Altair",
    "Antares",
    "Arcturus",
    "Bellatrix",
    "Betelgeuse",
    "Canopus",
    "Capella",
    "Castor",
    "Deneb",
    "Diphda",
    "Dubhe",
    "Elnath",
    "Enif",
    "Fomalhaut",
    "Gacrux",
    "Hadar",
    "Hamal",
    "Izar",
    "Kochab",
    "Lesath",
    "Markab",
    "Menkar",
    "Merak",
    "Mimosa",
    "Mintaka",
    "Mirach",
    "Mizar",
    "Naos",
    "Nunki",
    "Peacock",
    "Polaris",
    "Pollux",
    "Procyon",
    "Rasalhague",
    "Regulus",
    "Rigel",
    "Sabik",
    "Sadr",
    "Saiph",
    "Scheat",
    "Shaula",
    "Sirius",
    "Spica",
    "Suhail",
    "Thuban",
    "Vega",
    "Wezen",
    "Zaurak",
    "Zubenelgenubi",
]

GREEK_LETTERS = [
    "Alpha",
    "Beta",
    "Gamma",
    "Delta",
    "Epsilon",
    "Zeta",
    "Eta",
    "Theta",
    "Iota",
    "Kappa",
    "Lambda",
    "Mu",
    "Nu",
    "Xi",
    "Omicron",
    "Pi",
    "Rho",
    "Sigma",
    "Tau",
    "Upsilon",
    "Phi",
    "Chi",
    "Psi",
    "Omega",
]

CONSTELLATIONS = [
    "Andromedae",
    "Aquarii",
    "Aquilae",
    "Arietis",
    "Aurigae",
    "Bootis",
    "Cancri",
    "Canis Majoris",
    "Capricorni",
    "Carinae",
    "Cassiopeiae",
    "Centauri",
    "Cephei",
    "Ceti",
    "Columbae",
    "Coronae Borealis",
    "Corvi",
    "Crucis",
    "Cygni",
    "Draconis",
    "Eridani",
    "Geminorum",
    "Gruis",
    "Herculis",
    "Hydrae",
    "Leonis",
    "Librae",
    "Lupi",
    "Lyrae",
    "Ophiuchi",
    "Orionis",
    "Pavonis",
    "Pegasi",
    "Persei",
    "Phoenicis",
    "Piscium",
    "Sagittarii",
    "Scorpii",
    "Tauri",
    "Ursae Majoris",
    "Velorum",
    "Virginis",
]

COMPANION_SUFFIXES = ["B", "C", "D"]


def star_name_catalogue() -> list[str]:
    """Return every available star name in catalogue order.

    Returns:
        Unique names: proper names, then designations, then companions
    """
    designations = [f"{letter} {constellation}" for constellation in CONSTELLATIONS for letter in GREEK_LETTERS]
    companions = [f"{name} {suffix}" for suffix in COMPANION_SUFFIXES for name in designations]
    return PROPER_NAMES + designations + companions


def get_random_star_names(rng: GameRNG, count: int) -> list[str]:
    """Draw unique random star names.

    Args:
        rng: Generation RNG used to shuffle the catalogue
        count: Number of names wanted

    Returns:
        Up to count unique names. Fewer are returned when the catalogue is
        exhausted; callers needing an exact count must check the length.

    Examples:
        >>> len(get_random_star_names(GameRNG(42), 10))
        10
    """
    names = star_name_catalogue()
    rng.shuffle(names)
    return names[:count]
