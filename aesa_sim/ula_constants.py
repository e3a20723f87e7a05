# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 09:12:40 2026

@author: bboyg
"""

# Fixed rounded pi. Every formula in ula_formulas uses this value, not np.pi,
# so results match reference vectors computed with the same constant.
PI = 3.1415927

# Reserved, no formula uses it yet.
EULER_NUMBER = 2.71828

# |sin(N u / 2)| below this counts as a null
NULL_TOLERANCE = 1e-12
