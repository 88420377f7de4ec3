"""Save-file structures: stats, items, equipment, flags, bestiary and the save container."""