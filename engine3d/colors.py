"""Named RGBA colours as Vector4 values."""

from __future__ import annotations

from types import MappingProxyType

from .vectors import Vector4

Color = Vector4

ALICE_BLUE = Color(0.941176534, 0.972549081, 1.000000000, 1.000000000)
ANTIQUE_WHITE = Color(0.980392218, 0.921568692, 0.843137324, 1.000000000)
AQUA = Color(0.000000000, 1.000000000, 1.000000000, 1.000000000)
AQUAMARINE = Color(0.498039246, 1.000000000, 0.831372619, 1.000000000)
AZURE = Color(0.941176534, 1.000000000, 1.000000000, 1.000000000)
BEIGE = Color(0.960784376, 0.960784376, 0.862745166, 1.000000000)
BISQUE = Color(1.000000000, 0.894117713, 0.768627524, 1.000000000)
BLACK = Color(0.000000000, 0.000000000, 0.000000000, 1.000000000)
BLANCHED_ALMOND = Color(1.000000000, 0.921568692, 0.803921640, 1.000000000)
BLUE = Color(0.000000000, 0.000000000, 1.000000000, 1.000000000)
BLUE_VIOLET = Color(0.541176498, 0.168627456, 0.886274576, 1.000000000)
BROWN = Color(0.647058845, 0.164705887, 0.164705887, 1.000000000)
BURLY_WOOD = Color(0.870588303, 0.721568644, 0.529411793, 1.000000000)
CADET_BLUE = Color(0.372549027, 0.619607866, 0.627451003, 1.000000000)
CHARTREUSE = Color(0.498039246, 1.000000000, 0.000000000, 1.000000000)
CHOCOLATE = Color(0.823529482, 0.411764741, 0.117647067, 1.000000000)
CORAL = Color(1.000000000, 0.498039246, 0.313725501, 1.000000000)
CORNFLOWER_BLUE = Color(0.392156899, 0.584313750, 0.929411829, 1.000000000)
CORNSILK = Color(1.000000000, 0.972549081, 0.862745166, 1.000000000)
CRIMSON = Color(0.862745166, 0.078431375, 0.235294133, 1.000000000)
CYAN = Color(0.000000000, 1.000000000, 1.000000000, 1.000000000)
DARK_BLUE = Color(0.000000000, 0.000000000, 0.545098066, 1.000000000)
DARK_CYAN = Color(0.000000000, 0.545098066, 0.545098066, 1.000000000)
DARK_GOLDENROD = Color(0.721568644, 0.525490224, 0.043137256, 1.000000000)
DARK_GRAY = Color(0.662745118, 0.662745118, 0.662745118, 1.000000000)
DARK_GREEN = Color(0.000000000, 0.392156899, 0.000000000, 1.000000000)
DARK_KHAKI = Color(0.741176486, 0.717647076, 0.419607878, 1.000000000)
DARK_MAGENTA = Color(0.545098066, 0.000000000, 0.545098066, 1.000000000)
DARK_OLIVE_GREEN = Color(0.333333343, 0.419607878, 0.184313729, 1.000000000)
DARK_ORANGE = Color(1.000000000, 0.549019635, 0.000000000, 1.000000000)
DARK_ORCHID = Color(0.600000024, 0.196078449, 0.800000072, 1.000000000)
DARK_RED = Color(0.545098066, 0.000000000, 0.000000000, 1.000000000)
DARK_SALMON = Color(0.913725555, 0.588235319, 0.478431404, 1.000000000)
DARK_SEA_GREEN = Color(0.560784340, 0.737254918, 0.545098066, 1.000000000)
DARK_SLATE_BLUE = Color(0.282352954, 0.239215702, 0.545098066, 1.000000000)
DARK_SLATE_GRAY = Color(0.184313729, 0.309803933, 0.309803933, 1.000000000)
DARK_TURQUOISE = Color(0.000000000, 0.807843208, 0.819607913, 1.000000000)
DARK_VIOLET = Color(0.580392182, 0.000000000, 0.827451050, 1.000000000)
DEEP_PINK = Color(1.000000000, 0.078431375, 0.576470613, 1.000000000)
DEEP_SKY_BLUE = Color(0.000000000, 0.749019623, 1.000000000, 1.000000000)
DIM_GRAY = Color(0.411764741, 0.411764741, 0.411764741, 1.000000000)
DODGER_BLUE = Color(0.117647067, 0.564705908, 1.000000000, 1.000000000)
FIREBRICK = Color(0.698039234, 0.133333340, 0.133333340, 1.000000000)
FLORAL_WHITE = Color(1.000000000, 0.980392218, 0.941176534, 1.000000000)
FOREST_GREEN = Color(0.133333340, 0.545098066, 0.133333340, 1.000000000)
FUCHSIA = Color(1.000000000, 0.000000000, 1.000000000, 1.000000000)
GAINSBORO = Color(0.862745166, 0.862745166, 0.862745166, 1.000000000)
GHOST_WHITE = Color(0.972549081, 0.972549081, 1.000000000, 1.000000000)
GOLD = Color(1.000000000, 0.843137324, 0.000000000, 1.000000000)
GOLDENROD = Color(0.854902029, 0.647058845, 0.125490203, 1.000000000)
GRAY = Color(0.501960814, 0.501960814, 0.501960814, 1.000000000)
GREEN = Color(0.000000000, 0.501960814, 0.000000000, 1.000000000)
GREEN_YELLOW = Color(0.678431392, 1.000000000, 0.184313729, 1.000000000)
HONEYDEW = Color(0.941176534, 1.000000000, 0.941176534, 1.000000000)
HOT_PINK = Color(1.000000000, 0.411764741, 0.705882370, 1.000000000)
INDIAN_RED = Color(0.803921640, 0.360784322, 0.360784322, 1.000000000)
INDIGO = Color(0.294117659, 0.000000000, 0.509803951, 1.000000000)
IVORY = Color(1.000000000, 1.000000000, 0.941176534, 1.000000000)
KHAKI = Color(0.941176534, 0.901960850, 0.549019635, 1.000000000)
LAVENDER = Color(0.901960850, 0.901960850, 0.980392218, 1.000000000)
LAVENDER_BLUSH = Color(1.000000000, 0.941176534, 0.960784376, 1.000000000)
LAWN_GREEN = Color(0.486274540, 0.988235354, 0.000000000, 1.000000000)
LEMON_CHIFFON = Color(1.000000000, 0.980392218, 0.803921640, 1.000000000)
LIGHT_BLUE = Color(0.678431392, 0.847058892, 0.901960850, 1.000000000)
LIGHT_CORAL = Color(0.941176534, 0.501960814, 0.501960814, 1.000000000)
LIGHT_CYAN = Color(0.878431439, 1.000000000, 1.000000000, 1.000000000)
LIGHT_GOLDENROD_YELLOW = Color(0.980392218, 0.980392218, 0.823529482, 1.000000000)
LIGHT_GREEN = Color(0.564705908, 0.933333397, 0.564705908, 1.000000000)
LIGHT_GRAY = Color(0.827451050, 0.827451050, 0.827451050, 1.000000000)
LIGHT_PINK = Color(1.000000000, 0.713725507, 0.756862819, 1.000000000)
LIGHT_SALMON = Color(1.000000000, 0.627451003, 0.478431404, 1.000000000)
LIGHT_SEA_GREEN = Color(0.125490203, 0.698039234, 0.666666687, 1.000000000)
LIGHT_SKY_BLUE = Color(0.529411793, 0.807843208, 0.980392218, 1.000000000)
LIGHT_SLATE_GRAY = Color(0.466666698, 0.533333361, 0.600000024, 1.000000000)
LIGHT_STEEL_BLUE = Color(0.690196097, 0.768627524, 0.870588303, 1.000000000)
LIGHT_YELLOW = Color(1.000000000, 1.000000000, 0.878431439, 1.000000000)
LIME = Color(0.000000000, 1.000000000, 0.000000000, 1.000000000)
LIME_GREEN = Color(0.196078449, 0.803921640, 0.196078449, 1.000000000)
LINEN = Color(0.980392218, 0.941176534, 0.901960850, 1.000000000)
MAGENTA = Color(1.000000000, 0.000000000, 1.000000000, 1.000000000)
MAROON = Color(0.501960814, 0.000000000, 0.000000000, 1.000000000)
MEDIUM_AQUAMARINE = Color(0.400000036, 0.803921640, 0.666666687, 1.000000000)
MEDIUM_BLUE = Color(0.000000000, 0.000000000, 0.803921640, 1.000000000)
MEDIUM_ORCHID = Color(0.729411781, 0.333333343, 0.827451050, 1.000000000)
MEDIUM_PURPLE = Color(0.576470613, 0.439215720, 0.858823597, 1.000000000)
MEDIUM_SEA_GREEN = Color(0.235294133, 0.701960802, 0.443137288, 1.000000000)
MEDIUM_SLATE_BLUE = Color(0.482352972, 0.407843173, 0.933333397, 1.000000000)
MEDIUM_SPRING_GREEN = Color(0.000000000, 0.980392218, 0.603921592, 1.000000000)
MEDIUM_TURQUOISE = Color(0.282352954, 0.819607913, 0.800000072, 1.000000000)
MEDIUM_VIOLET_RED = Color(0.780392230, 0.082352944, 0.521568656, 1.000000000)
MIDNIGHT_BLUE = Color(0.098039225, 0.098039225, 0.439215720, 1.000000000)
MINT_CREAM = Color(0.960784376, 1.000000000, 0.980392218, 1.000000000)
MISTY_ROSE = Color(1.000000000, 0.894117713, 0.882353008, 1.000000000)
MOCCASIN = Color(1.000000000, 0.894117713, 0.709803939, 1.000000000)
NAVAJO_WHITE = Color(1.000000000, 0.870588303, 0.678431392, 1.000000000)
NAVY = Color(0.000000000, 0.000000000, 0.501960814, 1.000000000)
OLD_LACE = Color(0.992156923, 0.960784376, 0.901960850, 1.000000000)
OLIVE = Color(0.501960814, 0.501960814, 0.000000000, 1.000000000)
OLIVE_DRAB = Color(0.419607878, 0.556862772, 0.137254909, 1.000000000)
ORANGE = Color(1.000000000, 0.647058845, 0.000000000, 1.000000000)
ORANGE_RED = Color(1.000000000, 0.270588249, 0.000000000, 1.000000000)
ORCHID = Color(0.854902029, 0.439215720, 0.839215755, 1.000000000)
PALE_GOLDENROD = Color(0.933333397, 0.909803987, 0.666666687, 1.000000000)
PALE_GREEN = Color(0.596078455, 0.984313786, 0.596078455, 1.000000000)
PALE_TURQUOISE = Color(0.686274529, 0.933333397, 0.933333397, 1.000000000)
PALE_VIOLET_RED = Color(0.858823597, 0.439215720, 0.576470613, 1.000000000)
PAPAYA_WHIP = Color(1.000000000, 0.937254965, 0.835294187, 1.000000000)
PEACH_PUFF = Color(1.000000000, 0.854902029, 0.725490212, 1.000000000)
PERU = Color(0.803921640, 0.521568656, 0.247058839, 1.000000000)
PINK = Color(1.000000000, 0.752941251, 0.796078503, 1.000000000)
PLUM = Color(0.866666734, 0.627451003, 0.866666734, 1.000000000)
POWDER_BLUE = Color(0.690196097, 0.878431439, 0.901960850, 1.000000000)
PURPLE = Color(0.501960814, 0.000000000, 0.501960814, 1.000000000)
RED = Color(1.000000000, 0.000000000, 0.000000000, 1.000000000)
ROSY_BROWN = Color(0.737254918, 0.560784340, 0.560784340, 1.000000000)
ROYAL_BLUE = Color(0.254901975, 0.411764741, 0.882353008, 1.000000000)
SADDLE_BROWN = Color(0.545098066, 0.270588249, 0.074509807, 1.000000000)
SALMON = Color(0.980392218, 0.501960814, 0.447058856, 1.000000000)
SANDY_BROWN = Color(0.956862807, 0.643137276, 0.376470625, 1.000000000)
SEA_GREEN = Color(0.180392161, 0.545098066, 0.341176480, 1.000000000)
SEA_SHELL = Color(1.000000000, 0.960784376, 0.933333397, 1.000000000)
SIENNA = Color(0.627451003, 0.321568638, 0.176470593, 1.000000000)
SILVER = Color(0.752941251, 0.752941251, 0.752941251, 1.000000000)
SKY_BLUE = Color(0.529411793, 0.807843208, 0.921568692, 1.000000000)
SLATE_BLUE = Color(0.415686309, 0.352941185, 0.803921640, 1.000000000)
SLATE_GRAY = Color(0.439215720, 0.501960814, 0.564705908, 1.000000000)
SNOW = Color(1.000000000, 0.980392218, 0.980392218, 1.000000000)
SPRING_GREEN = Color(0.000000000, 1.000000000, 0.498039246, 1.000000000)
STEEL_BLUE = Color(0.274509817, 0.509803951, 0.705882370, 1.000000000)
TAN = Color(0.823529482, 0.705882370, 0.549019635, 1.000000000)
TEAL = Color(0.000000000, 0.501960814, 0.501960814, 1.000000000)
THISTLE = Color(0.847058892, 0.749019623, 0.847058892, 1.000000000)
TOMATO = Color(1.000000000, 0.388235331, 0.278431386, 1.000000000)
TRANSPARENT = Color(0.000000000, 0.000000000, 0.000000000, 0.000000000)
TURQUOISE = Color(0.250980407, 0.878431439, 0.815686345, 1.000000000)
VIOLET = Color(0.933333397, 0.509803951, 0.933333397, 1.000000000)
WHEAT = Color(0.960784376, 0.870588303, 0.701960802, 1.000000000)
WHITE = Color(1.000000000, 1.000000000, 1.000000000, 1.000000000)
WHITE_SMOKE = Color(0.960784376, 0.960784376, 0.960784376, 1.000000000)
YELLOW = Color(1.000000000, 1.000000000, 0.000000000, 1.000000000)
YELLOW_GREEN = Color(0.603921592, 0.803921640, 0.196078449, 1.000000000)

NAMED = MappingProxyType({
    "AliceBlue": ALICE_BLUE,
    "AntiqueWhite": ANTIQUE_WHITE,
    "Aqua": AQUA,
    "Aquamarine": AQUAMARINE,
    "Azure": AZURE,
    "Beige": BEIGE,
    "Bisque": BISQUE,
    "Black": BLACK,
    "BlanchedAlmond": BLANCHED_ALMOND,
    "Blue": BLUE,
    "BlueViolet": BLUE_VIOLET,
    "Brown": BROWN,
    "BurlyWood": BURLY_WOOD,
    "CadetBlue": CADET_BLUE,
    "Chartreuse": CHARTREUSE,
    "Chocolate": CHOCOLATE,
    "Coral": CORAL,
    "CornflowerBlue": CORNFLOWER_BLUE,
    "Cornsilk": CORNSILK,
    "Crimson": CRIMSON,
    "Cyan": CYAN,
    "DarkBlue": DARK_BLUE,
    "DarkCyan": DARK_CYAN,
    "DarkGoldenrod": DARK_GOLDENROD,
    "DarkGray": DARK_GRAY,
    "DarkGreen": DARK_GREEN,
    "DarkKhaki": DARK_KHAKI,
    "DarkMagenta": DARK_MAGENTA,
    "DarkOliveGreen": DARK_OLIVE_GREEN,
    "DarkOrange": DARK_ORANGE,
    "DarkOrchid": DARK_ORCHID,
    "DarkRed": DARK_RED,
    "DarkSalmon": DARK_SALMON,
    "DarkSeaGreen": DARK_SEA_GREEN,
    "DarkSlateBlue": DARK_SLATE_BLUE,
    "DarkSlateGray": DARK_SLATE_GRAY,
    "DarkTurquoise": DARK_TURQUOISE,
    "DarkViolet": DARK_VIOLET,
    "DeepPink": DEEP_PINK,
    "DeepSkyBlue": DEEP_SKY_BLUE,
    "DimGray": DIM_GRAY,
    "DodgerBlue": DODGER_BLUE,
    "Firebrick": FIREBRICK,
    "FloralWhite": FLORAL_WHITE,
    "ForestGreen": FOREST_GREEN,
    "Fuchsia": FUCHSIA,
    "Gainsboro": GAINSBORO,
    "GhostWhite": GHOST_WHITE,
    "Gold": GOLD,
    "Goldenrod": GOLDENROD,
    "Gray": GRAY,
    "Green": GREEN,
    "GreenYellow": GREEN_YELLOW,
    "Honeydew": HONEYDEW,
    "HotPink": HOT_PINK,
    "IndianRed": INDIAN_RED,
    "Indigo": INDIGO,
    "Ivory": IVORY,
    "Khaki": KHAKI,
    "Lavender": LAVENDER,
    "LavenderBlush": LAVENDER_BLUSH,
    "LawnGreen": LAWN_GREEN,
    "LemonChiffon": LEMON_CHIFFON,
    "LightBlue": LIGHT_BLUE,
    "LightCoral": LIGHT_CORAL,
    "LightCyan": LIGHT_CYAN,
    "LightGoldenrodYellow": LIGHT_GOLDENROD_YELLOW,
    "LightGreen": LIGHT_GREEN,
    "LightGray": LIGHT_GRAY,
    "LightPink": LIGHT_PINK,
    "LightSalmon": LIGHT_SALMON,
    "LightSeaGreen": LIGHT_SEA_GREEN,
    "LightSkyBlue": LIGHT_SKY_BLUE,
    "LightSlateGray": LIGHT_SLATE_GRAY,
    "LightSteelBlue": LIGHT_STEEL_BLUE,
    "LightYellow": LIGHT_YELLOW,
    "Lime": LIME,
    "LimeGreen": LIME_GREEN,
    "Linen": LINEN,
    "Magenta": MAGENTA,
    "Maroon": MAROON,
    "MediumAquamarine": MEDIUM_AQUAMARINE,
    "MediumBlue": MEDIUM_BLUE,
    "MediumOrchid": MEDIUM_ORCHID,
    "MediumPurple": MEDIUM_PURPLE,
    "MediumSeaGreen": MEDIUM_SEA_GREEN,
    "MediumSlateBlue": MEDIUM_SLATE_BLUE,
    "MediumSpringGreen": MEDIUM_SPRING_GREEN,
    "MediumTurquoise": MEDIUM_TURQUOISE,
    "MediumVioletRed": MEDIUM_VIOLET_RED,
    "MidnightBlue": MIDNIGHT_BLUE,
    "MintCream": MINT_CREAM,
    "MistyRose": MISTY_ROSE,
    "Moccasin": MOCCASIN,
    "NavajoWhite": NAVAJO_WHITE,
    "Navy": NAVY,
    "OldLace": OLD_LACE,
    "Olive": OLIVE,
    "OliveDrab": OLIVE_DRAB,
    "Orange": ORANGE,
    "OrangeRed": ORANGE_RED,
    "Orchid": ORCHID,
    "PaleGoldenrod": PALE_GOLDENROD,
    "PaleGreen": PALE_GREEN,
    "PaleTurquoise": PALE_TURQUOISE,
    "PaleVioletRed": PALE_VIOLET_RED,
    "PapayaWhip": PAPAYA_WHIP,
    "PeachPuff": PEACH_PUFF,
    "Peru": PERU,
    "Pink": PINK,
    "Plum": PLUM,
    "PowderBlue": POWDER_BLUE,
    "Purple": PURPLE,
    "Red": RED,
    "RosyBrown": ROSY_BROWN,
    "RoyalBlue": ROYAL_BLUE,
    "SaddleBrown": SADDLE_BROWN,
    "Salmon": SALMON,
    "SandyBrown": SANDY_BROWN,
    "SeaGreen": SEA_GREEN,
    "SeaShell": SEA_SHELL,
    "Sienna": SIENNA,
    "Silver": SILVER,
    "SkyBlue": SKY_BLUE,
    "SlateBlue": SLATE_BLUE,
    "SlateGray": SLATE_GRAY,
    "Snow": SNOW,
    "SpringGreen": SPRING_GREEN,
    "SteelBlue": STEEL_BLUE,
    "Tan": TAN,
    "Teal": TEAL,
    "Thistle": THISTLE,
    "Tomato": TOMATO,
    "Transparent": TRANSPARENT,
    "Turquoise": TURQUOISE,
    "Violet": VIOLET,
    "Wheat": WHEAT,
    "White": WHITE,
    "WhiteSmoke": WHITE_SMOKE,
    "Yellow": YELLOW,
    "YellowGreen": YELLOW_GREEN,
})

_BY_KEY = {name.lower(): color for name, color in NAMED.items()}


def _key(name: str) -> str:
    return name.replace("_", "").replace(" ", "").replace("-", "").lower()


def by_name(name: str) -> Color:
    """Look up a colour by name, ignoring case, spaces, dashes and underscores."""
    try:
        return _BY_KEY[_key(name)]
    except KeyError:
        raise KeyError(f"unknown colour: {name!r}") from None