"""Shrinkers for failing examples: basic, integers, floats, lists and combinators."""