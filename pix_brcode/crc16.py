import crcmod.predefined


# CRC-16/CCITT-FALSE: polinômio 0x1021, início 0xFFFF, sem XOR final.
_crc16 = crcmod.predefined.mkPredefinedCrcFun('crc-ccitt-false')


def calcular_crc16(payload: str) -> str:
    '''
    Calcula o CRC do BR Code sobre o payload completo, incluindo o
    prefixo "6304" do campo 63.
    '''
    crc = _crc16(payload.encode('utf-8'))
    return f"{crc:04X}"
