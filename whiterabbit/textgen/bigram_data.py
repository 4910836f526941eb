"""Letter statistics for English text, in percent of all bigrams."""

LETTERS = "abcdefghijklmnopqrstuvwxyz"

# word-initial letter frequencies, indexed like LETTERS
WORD_START_FREQ = (
    0.1154, 0.043, 0.052, 0.032, 0.028, 0.04, 0.016, 0.042, 0.073, 0.0051, 0.0086,
    0.024, 0.038, 0.023, 0.076, 0.043, 0.0022, 0.028, 0.067, 0.16, 0.012, 0.0082,
    0.055, 0.00045, 0.0076, 0.00045,
)

WORD_LENGTHS = tuple(range(1, 14))
WORD_LEN_DISTRIBUTION = (
    0.031500223549973574, 0.1717270251595334, 0.21533959273259357,
    0.15851725399341543, 0.10974271430313375, 0.08657480795024995,
    0.07316180953542249, 0.05690362963866195, 0.04064544974190139,
    0.027435678575783436, 0.01524204365321302, 0.009145226191927812,
    0.004064544974190139,
)

BIGRAM_FREQUENCIES = (
    ("th", 3.56), ("he", 3.07), ("in", 2.43), ("er", 2.05), ("an", 1.99), ("re", 1.85),
    ("on", 1.76), ("at", 1.49), ("en", 1.45), ("nd", 1.35), ("ti", 1.34), ("es", 1.34),
    ("or", 1.28), ("te", 1.20), ("of", 1.17), ("ed", 1.17), ("is", 1.13), ("it", 1.12),
    ("al", 1.09), ("ar", 1.07), ("st", 1.05), ("to", 1.04), ("nt", 1.04), ("ng", 0.95),
    ("se", 0.93), ("ha", 0.93), ("as", 0.87), ("ou", 0.87), ("io", 0.83), ("le", 0.83),
    ("ve", 0.83), ("co", 0.79), ("me", 0.79), ("de", 0.76), ("hi", 0.76), ("ri", 0.73),
    ("ro", 0.73), ("ic", 0.70), ("ne", 0.69), ("ea", 0.69), ("ra", 0.69), ("ce", 0.65),
    ("li", 0.62), ("ch", 0.60), ("ll", 0.58), ("be", 0.58), ("ma", 0.57), ("si", 0.55),
    ("om", 0.55), ("ur", 0.54), ("ca", 0.54), ("el", 0.53), ("ta", 0.53), ("la", 0.52),
    ("ns", 0.51), ("di", 0.50), ("fo", 0.50), ("ho", 0.50), ("pe", 0.49), ("ec", 0.49),
    ("pr", 0.48), ("no", 0.48), ("ct", 0.47), ("us", 0.47), ("ac", 0.46), ("ot", 0.46),
    ("il", 0.45), ("tr", 0.44), ("ly", 0.44), ("nc", 0.43), ("et", 0.43), ("ut", 0.43),
    ("ss", 0.42), ("so", 0.42), ("rs", 0.42), ("un", 0.42), ("lo", 0.41), ("wa", 0.41),
    ("ge", 0.40), ("ie", 0.39), ("wh", 0.39), ("ee", 0.39), ("wi", 0.38), ("em", 0.37),
    ("ad", 0.37), ("ol", 0.37), ("rt", 0.37), ("po", 0.36), ("we", 0.36), ("na", 0.35),
    ("ul", 0.35), ("ni", 0.34), ("ts", 0.34), ("mo", 0.34), ("ow", 0.33), ("pa", 0.32),
    ("im", 0.32), ("mi", 0.32), ("ai", 0.32), ("sh", 0.31), ("ir", 0.31), ("su", 0.31),
    ("id", 0.30), ("os", 0.29), ("iv", 0.29), ("ia", 0.29), ("am", 0.29), ("fi", 0.29),
    ("ci", 0.28), ("vi", 0.28), ("pl", 0.28), ("ig", 0.26), ("tu", 0.26), ("ev", 0.26),
    ("ld", 0.25), ("ry", 0.25), ("mp", 0.25), ("fe", 0.24), ("bl", 0.24), ("ab", 0.23),
    ("gh", 0.23), ("ty", 0.23), ("op", 0.23), ("wo", 0.22), ("sa", 0.22), ("ay", 0.22),
    ("ex", 0.21), ("ke", 0.21), ("fr", 0.21), ("oo", 0.21), ("av", 0.20), ("ag", 0.20),
    ("if", 0.20), ("ap", 0.20), ("gr", 0.20), ("od", 0.19), ("bo", 0.19), ("sp", 0.19),
    ("rd", 0.19), ("do", 0.18), ("uc", 0.18), ("bu", 0.18), ("ei", 0.18), ("ov", 0.18),
    ("by", 0.18), ("rm", 0.18), ("ep", 0.17), ("tt", 0.17), ("oc", 0.17), ("fa", 0.16),
    ("ef", 0.16), ("cu", 0.16), ("rn", 0.16), ("sc", 0.15), ("gi", 0.15), ("da", 0.15),
    ("yo", 0.15), ("cr", 0.15), ("cl", 0.15), ("du", 0.15), ("ga", 0.15), ("qu", 0.15),
    ("ue", 0.15), ("ff", 0.15), ("ba", 0.15), ("ey", 0.14), ("ls", 0.14), ("va", 0.14),
    ("um", 0.14), ("pp", 0.14), ("ua", 0.14), ("up", 0.14), ("lu", 0.14), ("go", 0.13),
    ("ht", 0.13), ("ru", 0.13), ("ug", 0.13), ("ds", 0.13), ("lt", 0.12), ("pi", 0.12),
    ("rc", 0.12), ("rr", 0.12), ("eg", 0.12), ("au", 0.12), ("ck", 0.12), ("ew", 0.11),
    ("mu", 0.11), ("br", 0.11), ("bi", 0.10), ("pt", 0.10), ("ak", 0.10), ("pu", 0.10),
    ("ui", 0.10), ("rg", 0.10), ("ib", 0.10), ("tl", 0.10), ("ny", 0.10), ("ki", 0.10),
    ("rk", 0.09), ("ys", 0.09), ("ob", 0.09), ("mm", 0.09), ("fu", 0.09), ("ph", 0.09),
    ("og", 0.09), ("ms", 0.09), ("ye", 0.08), ("ud", 0.08), ("mb", 0.08), ("ip", 0.08),
    ("ub", 0.08), ("oi", 0.08), ("rl", 0.08), ("gu", 0.08), ("dr", 0.08), ("hr", 0.08),
    ("cc", 0.08), ("tw", 0.08), ("ft", 0.08), ("wn", 0.08), ("nu", 0.08), ("af", 0.07),
    ("hu", 0.07), ("nn", 0.07), ("eo", 0.07), ("vo", 0.07), ("rv", 0.07), ("nf", 0.07),
    ("xp", 0.06), ("gn", 0.06), ("sm", 0.06), ("fl", 0.06), ("iz", 0.06), ("ok", 0.06),
    ("nl", 0.06), ("my", 0.06), ("gl", 0.06), ("aw", 0.06), ("ju", 0.06), ("oa", 0.06),
    ("eq", 0.06), ("sy", 0.06), ("sl", 0.06), ("ps", 0.06), ("jo", 0.05), ("lf", 0.05),
    ("nv", 0.05), ("je", 0.05), ("nk", 0.05), ("kn", 0.05), ("gs", 0.05), ("dy", 0.05),
    ("hy", 0.05), ("ze", 0.05), ("ks", 0.05), ("xt", 0.04), ("bs", 0.04), ("ik", 0.04),
    ("dd", 0.04), ("cy", 0.04), ("rp", 0.04), ("sk", 0.04), ("xi", 0.04), ("oe", 0.04),
    ("oy", 0.04), ("ws", 0.04), ("lv", 0.04), ("dl", 0.04), ("rf", 0.04), ("eu", 0.04),
    ("dg", 0.04), ("wr", 0.04), ("xa", 0.04), ("yi", 0.03), ("nm", 0.03), ("eb", 0.03),
    ("rb", 0.03), ("tm", 0.03), ("xc", 0.03), ("eh", 0.03), ("tc", 0.03), ("gy", 0.03),
    ("ja", 0.03), ("hn", 0.03), ("yp", 0.03), ("za", 0.03), ("gg", 0.03), ("ym", 0.02),
    ("sw", 0.02), ("lm", 0.02), ("cs", 0.02), ("ii", 0.02), ("ix", 0.02), ("xe", 0.02),
    ("oh", 0.02), ("lk", 0.02), ("dv", 0.02), ("lp", 0.02), ("ax", 0.02), ("ox", 0.02),
    ("uf", 0.02), ("dm", 0.02), ("iu", 0.02), ("sf", 0.02), ("bt", 0.02), ("ka", 0.02),
    ("yt", 0.02), ("ek", 0.02), ("pm", 0.02), ("ya", 0.02), ("gt", 0.02), ("wl", 0.02),
    ("rh", 0.02), ("yl", 0.02), ("hs", 0.02), ("ah", 0.02), ("yc", 0.02), ("yn", 0.02),
    ("rw", 0.02), ("hm", 0.02), ("lw", 0.02), ("hl", 0.02), ("ae", 0.02), ("zi", 0.02),
    ("az", 0.02), ("lc", 0.02), ("py", 0.02), ("aj", 0.02), ("iq", 0.01), ("nj", 0.01),
    ("bb", 0.01), ("nh", 0.01), ("uo", 0.01), ("kl", 0.01), ("lr", 0.01), ("tn", 0.01),
    ("gm", 0.01), ("sn", 0.01), ("nr", 0.01), ("fy", 0.01), ("mn", 0.01), ("dw", 0.01),
    ("sb", 0.01), ("yr", 0.01), ("dn", 0.01), ("sq", 0.01), ("zo", 0.01), ("oj", 0.01),
    ("yd", 0.01), ("lb", 0.01), ("wt", 0.01), ("lg", 0.01), ("ko", 0.01), ("np", 0.01),
    ("sr", 0.01), ("ky", 0.01), ("ln", 0.01), ("nw", 0.01), ("tf", 0.01), ("fs", 0.01),
    ("dh", 0.01), ("sd", 0.01), ("vy", 0.01), ("dj", 0.01), ("hw", 0.01), ("xu", 0.01),
    ("ao", 0.01), ("ml", 0.01), ("uk", 0.01), ("uy", 0.01), ("ej", 0.01), ("ez", 0.01),
    ("hb", 0.01), ("nz", 0.01), ("nb", 0.01), ("mc", 0.01), ("yb", 0.01), ("tp", 0.01),
    ("xh", 0.01), ("ux", 0.01), ("tz", 0.01), ("mf", 0.01), ("wd", 0.01), ("oz", 0.01),
    ("yw", 0.01), ("kh", 0.01), ("gd", 0.01), ("bm", 0.01), ("mr", 0.01), ("ku", 0.01),
    ("uv", 0.01), ("dt", 0.01), ("hd", 0.01), ("aa", 0.01), ("xx", 0.01), ("df", 0.01),
    ("db", 0.01), ("ji", 0.01), ("kr", 0.01), ("xo", 0.01), ("cm", 0.01), ("zz", 0.01),
    ("zy", 0.01), ("zu", 0.01), ("vu", 0.01), ("kw", 0.01), ("bj", 0.01),
)
