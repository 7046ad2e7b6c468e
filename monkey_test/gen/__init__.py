"""Example generators: fixed, integers, floats, booleans, picks, sizes and lists."""