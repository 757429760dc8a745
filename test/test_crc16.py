from pix_brcode.crc16 import calcular_crc16


def test_valor_de_verificacao_ccitt_false():
    assert calcular_crc16('123456789') == '29B1'


def test_exemplo_publicado_pelo_bacen():
    payload = (
        '00020126580014br.gov.bcb.pix'
        '0136123e4567-e12b-12d1-a456-426655440000'
        '52040000'
        '5303986'
        '5802BR'
        '5913Fulano de Tal'
        '6008BRASILIA'
        '62070503***'
        '6304'
    )

    assert calcular_crc16(payload) == '1D3D'


def test_quatro_digitos_hexadecimais_maiusculos():
    crc = calcular_crc16('000201')

    assert len(crc) == 4
    assert crc == crc.upper()
    int(crc, 16)


def test_deterministico():
    assert calcular_crc16('6304') == calcular_crc16('6304')


def test_entrada_vazia_devolve_valor_inicial():
    assert calcular_crc16('') == 'FFFF'
