"""
Chemical elements that a resonance ionization scheme can be submitted for.
"""

from enum import Enum

from rimsdb.core.constants import IONIZATION_POTENTIALS


class Element(Enum):
    """
    Closed set of elements, hydrogen to hassium.

    The value of each member is its short symbol, which is also how the
    element is written into submission documents.
    """

    H = "H"
    HE = "He"
    LI = "Li"
    BE = "Be"
    B = "B"
    C = "C"
    N = "N"
    O = "O"
    F = "F"
    NE = "Ne"
    NA = "Na"
    MG = "Mg"
    AL = "Al"
    SI = "Si"
    P = "P"
    S = "S"
    CL = "Cl"
    AR = "Ar"
    K = "K"
    CA = "Ca"
    SC = "Sc"
    TI = "Ti"
    V = "V"
    CR = "Cr"
    MN = "Mn"
    FE = "Fe"
    CO = "Co"
    NI = "Ni"
    CU = "Cu"
    ZN = "Zn"
    GA = "Ga"
    GE = "Ge"
    AS = "As"
    SE = "Se"
    BR = "Br"
    KR = "Kr"
    RB = "Rb"
    SR = "Sr"
    Y = "Y"
    ZR = "Zr"
    NB = "Nb"
    MO = "Mo"
    TC = "Tc"
    RU = "Ru"
    RH = "Rh"
    PD = "Pd"
    AG = "Ag"
    CD = "Cd"
    IN = "In"
    SN = "Sn"
    SB = "Sb"
    TE = "Te"
    I = "I"
    XE = "Xe"
    CS = "Cs"
    BA = "Ba"
    LA = "La"
    CE = "Ce"
    PR = "Pr"
    ND = "Nd"
    PM = "Pm"
    SM = "Sm"
    EU = "Eu"
    GD = "Gd"
    TB = "Tb"
    DY = "Dy"
    HO = "Ho"
    ER = "Er"
    TM = "Tm"
    YB = "Yb"
    LU = "Lu"
    HF = "Hf"
    TA = "Ta"
    W = "W"
    RE = "Re"
    OS = "Os"
    IR = "Ir"
    PT = "Pt"
    AU = "Au"
    HG = "Hg"
    TL = "Tl"
    PB = "Pb"
    BI = "Bi"
    PO = "Po"
    AT = "At"
    RN = "Rn"
    FR = "Fr"
    RA = "Ra"
    AC = "Ac"
    TH = "Th"
    PA = "Pa"
    U = "U"
    NP = "Np"
    PU = "Pu"
    AM = "Am"
    CM = "Cm"
    BK = "Bk"
    CF = "Cf"
    ES = "Es"
    FM = "Fm"
    MD = "Md"
    NO = "No"
    LR = "Lr"
    RF = "Rf"
    DB = "Db"
    SG = "Sg"
    BH = "Bh"
    HS = "Hs"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Element":
        """
        Parse an element from its short symbol.

        Parameters
        ----------
        symbol : str
            Element symbol, e.g. "Fe"; matched case-insensitively

        Returns
        -------
        Element
            Matching element

        Raises
        ------
        ValueError
            If the symbol is not part of the enumeration
        """
        key = str(symbol).strip().capitalize()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown element: '{symbol}'") from None

    @property
    def symbol(self) -> str:
        """Short symbol of the element."""
        return self.value

    @property
    def ip(self) -> float:
        """First ionization potential in cm^-1."""
        return IONIZATION_POTENTIALS[self.value]

    def __str__(self) -> str:
        return self.value
