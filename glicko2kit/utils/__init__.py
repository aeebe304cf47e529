"""constants, math helpers and scale conversions shared by the rating code"""
