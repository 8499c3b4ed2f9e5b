class CacheTTL:
    """
    TTL values (in seconds) for different cache types.
    """

    # Long-lived (positions for a birth moment never change)
    EPHEMERIS = 60 * 60 * 24 * 30     # 30 days
