"""
TI-83 Plus / TI-84 Plus Token Data
==================================

Declarative byte <-> mnemonic data for the TI-BASIC token set. The
TokenTable in ``table.py`` builds its indices from these dictionaries.

Layout
------
ONE_BYTE_TOKENS maps a single opcode byte to its mnemonic.

TWO_BYTE_TOKENS maps a prefix byte to a dictionary of suffix byte ->
mnemonic. On disk a two-byte token is stored prefix first, so the
table records it as ``prefix | (suffix << 8)`` and writes it
little-endian.

Omissions
---------
- Uppercase letters A-Z (0x41-0x5A) are produced by the tokenizer's
  single-letter fallback and decoded as literal characters.
- Single lowercase-letter tokens (statistics results, sequence names,
  the 0xBB lowercase alphabet) are left out so isolated letters in
  source always normalize to uppercase variables.
- Prefix bytes (0x5C-0x63, 0x7E, 0xAA, 0xBB, 0xEF) have no one-byte
  entry of their own.

Reference
---------
- TI-83 Plus SDK token equates (ti83plus.inc, tXXX names)
- https://www.ticalc.org/archives/files/fileinfo/
"""

NEWLINE = "\n"
ASM_PROGRAM = "AsmPrgm"

# =============================================================================
# One-byte tokens
# =============================================================================

ONE_BYTE_TOKENS: dict[int, str] = {
    0x01: "►DMS",
    0x02: "►Dec",
    0x03: "►Frac",
    0x04: "→",
    0x05: "Boxplot",
    0x06: "[",
    0x07: "]",
    0x08: "{",
    0x09: "}",
    0x0A: "ʳ",
    0x0B: "°",
    0x0C: "⁻¹",
    0x0D: "²",
    0x0E: "ᵀ",
    0x0F: "³",
    0x10: "(",
    0x11: ")",
    0x12: "round(",
    0x13: "pxl-Test(",
    0x14: "augment(",
    0x15: "rowSwap(",
    0x16: "row+(",
    0x17: "*row(",
    0x18: "*row+(",
    0x19: "max(",
    0x1A: "min(",
    0x1B: "R►Pr(",
    0x1C: "R►Pθ(",
    0x1D: "P►Rx(",
    0x1E: "P►Ry(",
    0x1F: "median(",
    0x20: "randM(",
    0x21: "mean(",
    0x22: "solve(",
    0x23: "seq(",
    0x24: "fnInt(",
    0x25: "nDeriv(",
    0x27: "fMin(",
    0x28: "fMax(",
    0x29: " ",
    0x2A: '"',
    0x2B: ",",
    0x2C: "[i]",
    0x2D: "!",
    0x2E: "CubicReg",
    0x2F: "QuartReg",
    0x30: "0",
    0x31: "1",
    0x32: "2",
    0x33: "3",
    0x34: "4",
    0x35: "5",
    0x36: "6",
    0x37: "7",
    0x38: "8",
    0x39: "9",
    0x3A: ".",
    0x3B: "ᴇ",
    0x3C: " or ",
    0x3D: " xor ",
    0x3E: ":",
    0x3F: NEWLINE,
    0x40: " and ",
    0x5B: "θ",
    0x5F: "prgm",
    0x64: "Radian",
    0x65: "Degree",
    0x66: "Normal",
    0x67: "Sci",
    0x68: "Eng",
    0x69: "Float",
    0x6A: "=",
    0x6B: "<",
    0x6C: ">",
    0x6D: "≤",
    0x6E: "≥",
    0x6F: "≠",
    0x70: "+",
    0x71: "-",
    0x72: "Ans",
    0x73: "Fix",
    0x74: "Horiz",
    0x75: "Full",
    0x76: "Func",
    0x77: "Param",
    0x78: "Polar",
    0x79: "Seq",
    0x7A: "IndpntAuto",
    0x7B: "IndpntAsk",
    0x7C: "DependAuto",
    0x7D: "DependAsk",
    0x7F: "□",
    0x80: "﹢",
    0x81: "·",
    0x82: "*",
    0x83: "/",
    0x84: "Trace",
    0x85: "ClrDraw",
    0x86: "ZStandard",
    0x87: "ZTrig",
    0x88: "ZBox",
    0x89: "Zoom In",
    0x8A: "Zoom Out",
    0x8B: "ZSquare",
    0x8C: "ZInteger",
    0x8D: "ZPrevious",
    0x8E: "ZDecimal",
    0x8F: "ZoomStat",
    0x90: "ZoomRcl",
    0x91: "PrintScreen",
    0x92: "ZoomSto",
    0x93: "Text(",
    0x94: " nPr ",
    0x95: " nCr ",
    0x96: "FnOn",
    0x97: "FnOff",
    0x98: "StorePic",
    0x99: "RecallPic",
    0x9A: "StoreGDB",
    0x9B: "RecallGDB",
    0x9C: "Line(",
    0x9D: "Vertical",
    0x9E: "Pt-On(",
    0x9F: "Pt-Off(",
    0xA0: "Pt-Change(",
    0xA1: "Pxl-On(",
    0xA2: "Pxl-Off(",
    0xA3: "Pxl-Change(",
    0xA4: "Shade(",
    0xA5: "Circle(",
    0xA6: "Horizontal",
    0xA7: "Tangent(",
    0xA8: "DrawInv",
    0xA9: "DrawF",
    0xAB: "rand",
    0xAC: "π",
    0xAD: "getKey",
    0xAE: "'",
    0xAF: "?",
    0xB0: "⁻",
    0xB1: "int(",
    0xB2: "abs(",
    0xB3: "det(",
    0xB4: "identity(",
    0xB5: "dim(",
    0xB6: "sum(",
    0xB7: "prod(",
    0xB8: "not(",
    0xB9: "iPart(",
    0xBA: "fPart(",
    0xBC: "√(",
    0xBD: "³√(",
    0xBE: "ln(",
    0xBF: "e^(",
    0xC0: "log(",
    0xC1: "10^(",
    0xC2: "sin(",
    0xC3: "sin⁻¹(",
    0xC4: "cos(",
    0xC5: "cos⁻¹(",
    0xC6: "tan(",
    0xC7: "tan⁻¹(",
    0xC8: "sinh(",
    0xC9: "sinh⁻¹(",
    0xCA: "cosh(",
    0xCB: "cosh⁻¹(",
    0xCC: "tanh(",
    0xCD: "tanh⁻¹(",
    0xCE: "If",
    0xCF: "Then",
    0xD0: "Else",
    0xD1: "While",
    0xD2: "Repeat",
    0xD3: "For(",
    0xD4: "End",
    0xD5: "Return",
    0xD6: "Lbl",
    0xD7: "Goto",
    0xD8: "Pause",
    0xD9: "Stop",
    0xDA: "IS>(",
    0xDB: "DS<(",
    0xDC: "Input",
    0xDD: "Prompt",
    0xDE: "Disp",
    0xDF: "DispGraph",
    0xE0: "Output(",
    0xE1: "ClrHome",
    0xE2: "Fill(",
    0xE3: "SortA(",
    0xE4: "SortD(",
    0xE5: "DispTable",
    0xE6: "Menu(",
    0xE7: "Send(",
    0xE8: "Get(",
    0xE9: "PlotsOn",
    0xEA: "PlotsOff",
    0xEB: "⌊",
    0xEC: "Plot1(",
    0xED: "Plot2(",
    0xEE: "Plot3(",
    0xF0: "^",
    0xF1: "×√",
    0xF2: "1-Var Stats",
    0xF3: "2-Var Stats",
    0xF4: "LinReg(a+bx)",
    0xF5: "ExpReg",
    0xF6: "LnReg",
    0xF7: "PwrReg",
    0xF8: "Med-Med",
    0xF9: "QuadReg",
    0xFA: "ClrList",
    0xFB: "ClrTable",
    0xFC: "Histogram",
    0xFD: "xyLine",
    0xFE: "Scatter",
    0xFF: "LinReg(ax+b)",
}

# =============================================================================
# Two-byte tokens, grouped by prefix byte
# =============================================================================

MATRIX_TOKENS: dict[int, str] = {
    0x00: "[A]",
    0x01: "[B]",
    0x02: "[C]",
    0x03: "[D]",
    0x04: "[E]",
    0x05: "[F]",
    0x06: "[G]",
    0x07: "[H]",
    0x08: "[I]",
    0x09: "[J]",
}

LIST_TOKENS: dict[int, str] = {
    0x00: "L₁",
    0x01: "L₂",
    0x02: "L₃",
    0x03: "L₄",
    0x04: "L₅",
    0x05: "L₆",
}

EQUATION_TOKENS: dict[int, str] = {
    0x10: "Y₁",
    0x11: "Y₂",
    0x12: "Y₃",
    0x13: "Y₄",
    0x14: "Y₅",
    0x15: "Y₆",
    0x16: "Y₇",
    0x17: "Y₈",
    0x18: "Y₉",
    0x19: "Y₀",
    0x20: "X₁ᴛ",
    0x21: "Y₁ᴛ",
    0x22: "X₂ᴛ",
    0x23: "Y₂ᴛ",
    0x24: "X₃ᴛ",
    0x25: "Y₃ᴛ",
    0x26: "X₄ᴛ",
    0x27: "Y₄ᴛ",
    0x28: "X₅ᴛ",
    0x29: "Y₅ᴛ",
    0x2A: "X₆ᴛ",
    0x2B: "Y₆ᴛ",
    0x40: "r₁",
    0x41: "r₂",
    0x42: "r₃",
    0x43: "r₄",
    0x44: "r₅",
    0x45: "r₆",
}

PICTURE_TOKENS: dict[int, str] = {
    0x00: "Pic1",
    0x01: "Pic2",
    0x02: "Pic3",
    0x03: "Pic4",
    0x04: "Pic5",
    0x05: "Pic6",
    0x06: "Pic7",
    0x07: "Pic8",
    0x08: "Pic9",
    0x09: "Pic0",
}

GDB_TOKENS: dict[int, str] = {
    0x00: "GDB1",
    0x01: "GDB2",
    0x02: "GDB3",
    0x03: "GDB4",
    0x04: "GDB5",
    0x05: "GDB6",
    0x06: "GDB7",
    0x07: "GDB8",
    0x08: "GDB9",
    0x09: "GDB0",
}

STATISTIC_TOKENS: dict[int, str] = {
    0x01: "RegEQ",
    0x03: "x̄",
    0x04: "Σx",
    0x05: "Σx²",
    0x06: "Sx",
    0x07: "σx",
    0x08: "minX",
    0x09: "maxX",
    0x0A: "minY",
    0x0B: "maxY",
    0x0C: "ȳ",
    0x0D: "Σy",
    0x0E: "Σy²",
    0x0F: "Sy",
    0x10: "σy",
    0x11: "Σxy",
    0x13: "Med",
    0x14: "Q₁",
    0x15: "Q₃",
    0x1B: "x₁",
    0x1C: "x₂",
    0x1D: "x₃",
    0x1E: "y₁",
    0x1F: "y₂",
    0x20: "y₃",
}

WINDOW_TOKENS: dict[int, str] = {
    0x00: "ZXscl",
    0x01: "ZYscl",
    0x02: "Xscl",
    0x03: "Yscl",
    0x04: "u(nMin)",
    0x05: "v(nMin)",
    0x06: "u(n-1)",
    0x07: "v(n-1)",
    0x08: "Zu(nMin)",
    0x09: "Zv(nMin)",
    0x0A: "Xmin",
    0x0B: "Xmax",
    0x0C: "Ymin",
    0x0D: "Ymax",
    0x0E: "Tmin",
    0x0F: "Tmax",
    0x10: "θmin",
    0x11: "θmax",
    0x12: "ZXmin",
    0x13: "ZXmax",
    0x14: "ZYmin",
    0x15: "ZYmax",
    0x16: "Zθmin",
    0x17: "Zθmax",
    0x18: "ZTmin",
    0x19: "ZTmax",
    0x1A: "TblStart",
    0x1B: "PlotStart",
    0x1C: "ZPlotStart",
    0x1D: "nMax",
    0x1E: "ZnMax",
    0x1F: "nMin",
    0x20: "ZnMin",
    0x21: "∆Tbl",
    0x22: "Tstep",
    0x23: "θstep",
    0x24: "ZTstep",
    0x25: "Zθstep",
    0x26: "∆X",
    0x27: "∆Y",
    0x28: "XFact",
    0x29: "YFact",
    0x2A: "TblInput",
    0x2C: "I%",
    0x2D: "PV",
    0x2E: "PMT",
    0x2F: "FV",
    0x30: "P/Y",
    0x31: "C/Y",
    0x32: "w(nMin)",
    0x33: "Zw(nMin)",
    0x34: "PlotStep",
    0x35: "ZPlotStep",
    0x36: "Xres",
    0x37: "ZXres",
}

GRAPH_FORMAT_TOKENS: dict[int, str] = {
    0x00: "Sequential",
    0x01: "Simul",
    0x02: "PolarGC",
    0x03: "RectGC",
    0x04: "CoordOn",
    0x05: "CoordOff",
    0x06: "Connected",
    0x07: "Dot",
    0x08: "AxesOn",
    0x09: "AxesOff",
    0x0A: "GridOn",
    0x0B: "GridOff",
    0x0C: "LabelOn",
    0x0D: "LabelOff",
    0x0E: "Web",
    0x0F: "Time",
    0x10: "uvAxes",
    0x11: "vwAxes",
    0x12: "uwAxes",
}

STRING_TOKENS: dict[int, str] = {
    0x00: "Str1",
    0x01: "Str2",
    0x02: "Str3",
    0x03: "Str4",
    0x04: "Str5",
    0x05: "Str6",
    0x06: "Str7",
    0x07: "Str8",
    0x08: "Str9",
    0x09: "Str0",
}

EXTENDED_TOKENS: dict[int, str] = {
    0x00: "npv(",
    0x01: "irr(",
    0x02: "bal(",
    0x03: "ΣPrn(",
    0x04: "ΣInt(",
    0x05: "►Nom(",
    0x06: "►Eff(",
    0x07: "dbd(",
    0x08: "lcm(",
    0x09: "gcd(",
    0x0A: "randInt(",
    0x0B: "randBin(",
    0x0C: "sub(",
    0x0D: "stdDev(",
    0x0E: "variance(",
    0x0F: "inString(",
    0x10: "normalcdf(",
    0x11: "invNorm(",
    0x12: "tcdf(",
    0x13: "χ²cdf(",
    0x14: "Fcdf(",
    0x15: "binompdf(",
    0x16: "binomcdf(",
    0x17: "poissonpdf(",
    0x18: "poissoncdf(",
    0x19: "geometpdf(",
    0x1A: "geometcdf(",
    0x1B: "normalpdf(",
    0x1C: "tpdf(",
    0x1D: "χ²pdf(",
    0x1E: "Fpdf(",
    0x1F: "randNorm(",
    0x20: "tvm_Pmt",
    0x21: "tvm_I%",
    0x22: "tvm_PV",
    0x23: "tvm_N",
    0x24: "tvm_FV",
    0x25: "conj(",
    0x26: "real(",
    0x27: "imag(",
    0x28: "angle(",
    0x29: "cumSum(",
    0x2A: "expr(",
    0x2B: "length(",
    0x2C: "ΔList(",
    0x2D: "ref(",
    0x2E: "rref(",
    0x2F: "►Rect",
    0x30: "►Polar",
    0x31: "[e]",
    0x32: "SinReg",
    0x33: "Logistic",
    0x34: "LinRegTTest",
    0x35: "ShadeNorm(",
    0x36: "Shade_t(",
    0x37: "Shadeχ²(",
    0x38: "ShadeF(",
    0x39: "Matr►list(",
    0x3A: "List►matr(",
    0x3B: "Z-Test(",
    0x3C: "T-Test",
    0x3D: "2-SampZTest(",
    0x3E: "1-PropZTest(",
    0x3F: "2-PropZTest(",
    0x40: "χ²-Test(",
    0x41: "ZInterval",
    0x42: "2-SampZInt(",
    0x43: "1-PropZInt(",
    0x44: "2-PropZInt(",
    0x45: "GraphStyle(",
    0x46: "2-SampTTest",
    0x47: "2-SampFTest",
    0x48: "TInterval",
    0x49: "2-SampTInt",
    0x4A: "SetUpEditor",
    0x4B: "Pmt_End",
    0x4C: "Pmt_Bgn",
    0x4D: "Real",
    0x4E: "re^θi",
    0x4F: "a+bi",
    0x50: "ExprOn",
    0x51: "ExprOff",
    0x52: "ClrAllLists",
    0x53: "GetCalc(",
    0x54: "DelVar",
    0x55: "Equ►String(",
    0x56: "String►Equ(",
    0x57: "Clear Entries",
    0x58: "Select(",
    0x59: "ANOVA(",
    0x5A: "ModBoxplot",
    0x5B: "NormProbPlot",
    0x64: "G-T",
    0x65: "ZoomFit",
    0x66: "DiagnosticOn",
    0x67: "DiagnosticOff",
    0x68: "Archive",
    0x69: "UnArchive",
    0x6A: "Asm(",
    0x6B: "AsmComp(",
    0x6C: ASM_PROGRAM,
}

TI84_TOKENS: dict[int, str] = {
    0x00: "setDate(",
    0x01: "setTime(",
    0x02: "checkTmr(",
    0x03: "setDtFmt(",
    0x04: "setTmFmt(",
    0x05: "timeCnv(",
    0x06: "dayOfWk(",
    0x07: "getDtStr(",
    0x08: "getTmStr(",
    0x09: "getDate",
    0x0A: "getTime",
    0x0B: "startTmr",
    0x0C: "getDtFmt",
    0x0D: "getTmFmt",
    0x0E: "isClockOn",
    0x0F: "ClockOff",
    0x10: "ClockOn",
    0x11: "OpenLib(",
    0x12: "ExecLib",
    0x13: "invT(",
    0x14: "χ²GOF-Test(",
    0x15: "LinRegTInt",
    0x16: "Manual-Fit",
    0x17: "ZQuadrant1",
    0x18: "ZFrac1/2",
    0x19: "ZFrac1/3",
    0x1A: "ZFrac1/4",
    0x1B: "ZFrac1/5",
    0x1C: "ZFrac1/8",
    0x1D: "ZFrac1/10",
}

TWO_BYTE_TOKENS: dict[int, dict[int, str]] = {
    0x5C: MATRIX_TOKENS,
    0x5D: LIST_TOKENS,
    0x5E: EQUATION_TOKENS,
    0x60: PICTURE_TOKENS,
    0x61: GDB_TOKENS,
    0x62: STATISTIC_TOKENS,
    0x63: WINDOW_TOKENS,
    0x7E: GRAPH_FORMAT_TOKENS,
    0xAA: STRING_TOKENS,
    0xBB: EXTENDED_TOKENS,
    0xEF: TI84_TOKENS,
}
