#!/usr/bin/env python3

import setuptools

setuptools.setup (
  name                          = "graphcalc",
  version                       = "1.0.0",
  license                       = 'BSD',
  keywords                      = "Math Calculator Graphing Expression Derivative",
  description                   = "Numeric evaluation, function composition and differentiation of calculator expressions",
  long_description              = "GraphCalc evaluates user entered math expressions like 'a*sin(b*x)+c' numerically for a graphing front end. "
    "Input accepts shorthand like '2pi', '3x' and '^' for powers, named variables, a library of common math functions and "
    "calls to other user defined functions by name. "
    "Derivatives are estimated by centered finite differences and expressions can be typeset as LaTeX using SymPy.",
  long_description_content_type = "text/plain",
  py_modules                    = ['gast', 'gcli', 'gcompose', 'gdefs', 'gdiff', 'geval', 'gmath', 'gnorm', 'gparser', 'gplot', 'gsym'],
  scripts                       = ['bin/graphcalc'],
  classifiers                   = [
    'Intended Audience :: Education',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Scientific/Engineering :: Mathematics',
  ],
  install_requires              = ['sympy>=1.4'],
  python_requires               = '>=3.6',
)
