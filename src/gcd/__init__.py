"""
Greatest-common-divisor domain package.
It holds the pure numeric kernel and the request-scoped value types the web layer exchanges.
Nothing in this package performs I/O.
"""
