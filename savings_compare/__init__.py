"""CD vs HYSA savings projection backend."""
