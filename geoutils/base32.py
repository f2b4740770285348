BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
BITS_PER_CHAR = 5
NOT_FOUND = -1


def valueToChar(value):
    '''
    This function returns the geohash character holding a 5 bits value
    :value: (int) value between 0 and 31
    Returns:
    :char: (str) the character, or an empty string if the value doesn't fit
    '''
    if value < 0 or value > 31:
        return ""

    return BASE32[value]


def charToValue(char):
    '''
    This function returns the 5 bits value of a geohash character
    :char: (str) a single character
    Returns:
    :value: (int) value between 0 and 31, NOT_FOUND if it's not a geohash character
    '''
    if len(char) != 1:
        return NOT_FOUND

    return BASE32.find(char)
