"""CQL statement builders that return a statement and its parameter names."""