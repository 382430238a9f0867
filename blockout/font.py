"""Standard ASCII 5x7 bitmap font, one byte per column."""

GLYPH_WIDTH = 5
GLYPH_HEIGHT = 8

# Each glyph packs its five column bytes, leftmost column in the high byte.
_GLYPHS = (
    0x0000000000, 0x3E5B4F5B3E, 0x3E6B4F6B3E, 0x1C3E7C3E1C,
    0x183C7E3C18, 0x1C577D571C, 0x1C5E7F5E1C, 0x00183C1800,
    0xFFE7C3E7FF, 0x0018241800, 0xFFE7DBE7FF, 0x30483A060E,
    0x2629792926, 0x407F050507, 0x407F05253F, 0x5A3CE73C5A,
    0x7F3E1C1C08, 0x081C1C3E7F, 0x14227F2214, 0x5F5F005F5F,
    0x06097F017F, 0x006689956A, 0x6060606060, 0x94A2FFA294,
    0x08047E0408, 0x10207E2010, 0x08082A1C08, 0x081C2A0808,
    0x1E10101010, 0x0C1E0C1E0C, 0x30383E3830, 0x060E3E0E06,
    0x0000000000, 0x00005F0000, 0x0007000700, 0x147F147F14,
    0x242A7F2A12, 0x2313086462, 0x3649562050, 0x0008070300,
    0x001C224100, 0x0041221C00, 0x2A1C7F1C2A, 0x08083E0808,
    0x0080703000, 0x0808080808, 0x0000606000, 0x2010080402,
    0x3E5149453E, 0x00427F4000, 0x7249494946, 0x2141494D33,
    0x1814127F10, 0x2745454539, 0x3C4A494931, 0x4121110907,
    0x3649494936, 0x464949291E, 0x0000140000, 0x0040340000,
    0x0008142241, 0x1414141414, 0x0041221408, 0x0201590906,
    0x3E415D594E, 0x7C1211127C, 0x7F49494936, 0x3E41414122,
    0x7F4141413E, 0x7F49494941, 0x7F09090901, 0x3E41415173,
    0x7F0808087F, 0x00417F4100, 0x2040413F01, 0x7F08142241,
    0x7F40404040, 0x7F021C027F, 0x7F0408107F, 0x3E4141413E,
    0x7F09090906, 0x3E4151215E, 0x7F09192946, 0x2649494932,
    0x03017F0103, 0x3F4040403F, 0x1F2040201F, 0x3F4038403F,
    0x6314081463, 0x0304780403, 0x6159494D43, 0x007F414141,
    0x0204081020, 0x004141417F, 0x0402010204, 0x4040404040,
    0x0003070800, 0x2054547840, 0x7F28444438, 0x3844444428,
    0x384444287F, 0x3854545418, 0x00087E0902, 0x18A4A49C78,
    0x7F08040478, 0x00447D4000, 0x2040403D00, 0x7F10284400,
    0x00417F4000, 0x7C04780478, 0x7C08040478, 0x3844444438,
    0xFC18242418, 0x18242418FC, 0x7C08040408, 0x4854545424,
    0x04043F4424, 0x3C4040207C, 0x1C2040201C, 0x3C4030403C,
    0x4428102844, 0x4C9090907C, 0x4464544C44, 0x0008364100,
    0x0000770000, 0x0041360800, 0x0201020402, 0x3C2623263C,
    0x1EA1A16112, 0x3A4040207A, 0x3854545559, 0x2155557941,
    0x2154547841, 0x2155547840, 0x2054557940, 0x0C1E527212,
    0x3955555559, 0x3954545459, 0x3955545458, 0x0000457C41,
    0x0002457D42, 0x0001457C40, 0xF0292429F0, 0xF0282528F0,
    0x7C54554500, 0x2054547C54, 0x7C0A097F49, 0x3249494932,
    0x3248484832, 0x324A484830, 0x3A4141217A, 0x3A42402078,
    0x009DA0A07D, 0x3944444439, 0x3D4040403D, 0x3C24FF2424,
    0x487E494366, 0x2B2FFC2F2B, 0xFF0929F620, 0xC0887E0903,
    0x2054547941, 0x0000447D41, 0x3048484A32, 0x384040227A,
    0x007A0A0A72, 0x7D0D19317D, 0x2629292F28, 0x2629292926,
    0x30484D4020, 0x3808080808, 0x0808080838, 0x2F10C8ACBA,
    0x2F102834FA, 0x00007B0000, 0x08142A1422, 0x22142A1408,
    0xAA005500AA, 0xAA55AA55AA, 0x000000FF00, 0x101010FF00,
    0x141414FF00, 0x1010FF00FF, 0x1010F010F0, 0x141414FC00,
    0x1414F700FF, 0x0000FF00FF, 0x1414F404FC, 0x141417101F,
    0x10101F101F, 0x1414141F00, 0x101010F000, 0x0000001F10,
    0x1010101F10, 0x101010F010, 0x000000FF10, 0x1010101010,
    0x101010FF10, 0x000000FF14, 0x0000FF00FF, 0x00001F1017,
    0x0000FC04F4, 0x1414171017, 0x1414F404F4, 0x0000FF00F7,
    0x1414141414, 0x1414F700F7, 0x1414141714, 0x10101F101F,
    0x141414F414, 0x1010F010F0, 0x00001F101F, 0x0000001F14,
    0x000000FC14, 0x0000F010F0, 0x1010FF10FF, 0x141414FF14,
    0x1010101F00, 0x000000F010, 0xFFFFFFFFFF, 0xF0F0F0F0F0,
    0xFFFFFF0000, 0x000000FFFF, 0x0F0F0F0F0F, 0x3844443844,
    0x7C2A2A3E14, 0x7E02020606, 0x027E027E02, 0x6355494163,
    0x3844443C04, 0x407E201E20, 0x06027E0202, 0x99A5E7A599,
    0x1C2A492A1C, 0x4C7201724C, 0x304A4D4D30, 0x3048784830,
    0xBC625A463D, 0x3E49494900, 0x7E0101017E, 0x2A2A2A2A2A,
    0x44445F4444, 0x40514A4440, 0x40444A5140, 0x0000FF0103,
    0xE080FF0000, 0x08086B6B08, 0x3612362436, 0x060F090F06,
    0x0000181800, 0x0000101000, 0x3040FF0101, 0x001F01011E,
    0x00191D1712, 0x003C3C3C3C, 0x0000000000,
)

GLYPH_COUNT = len(_GLYPHS)


def _code_point(code: "int | str") -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        code = ord(code)
    if not 0 <= code < GLYPH_COUNT:
        raise ValueError(f"character code out of range: {code}")
    return code


def glyph(code: "int | str") -> bytes:
    """Return the five column bytes of a character; bit 0 is the top row."""
    return _GLYPHS[_code_point(code)].to_bytes(GLYPH_WIDTH, "big")


def char_pixels(code: "int | str") -> "tuple[tuple[bool, ...], ...]":
    """Return the character as rows of lit pixels, top row first."""
    columns = glyph(code)
    return tuple(
        tuple(bool(column >> row & 1) for column in columns)
        for row in range(GLYPH_HEIGHT)
    )