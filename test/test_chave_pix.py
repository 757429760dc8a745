import pytest
from pix_brcode.chave_pix import (TipoChave, classificar_chave,
                                  normalizar_chave, validar_cpf)


def test_email_fica_inalterado():
    chave = classificar_chave('user@example.com')

    assert chave.tipo == TipoChave.EMAIL
    assert chave.valor_normalizado == 'user@example.com'


def test_email_remove_espacos_das_pontas():
    assert normalizar_chave('  user@example.com \n') == 'user@example.com'


def test_chave_aleatoria_fica_inalterada():
    uuid = '123e4567-E12B-12d1-a456-426655440000'
    chave = classificar_chave(uuid)

    assert chave.tipo == TipoChave.ALEATORIA
    assert chave.valor_normalizado == uuid


def test_cpf_valido_sem_prefixo():
    chave = classificar_chave('11144477735')

    assert chave.tipo == TipoChave.CPF
    assert chave.valor_normalizado == '11144477735'


def test_cpf_formatado_vira_so_digitos():
    chave = classificar_chave('111.444.777-35')

    assert chave.tipo == TipoChave.CPF
    assert chave.valor_normalizado == '11144477735'


def test_onze_digitos_sem_cpf_valido_vira_celular():
    chave = classificar_chave('11987654321')

    assert chave.tipo == TipoChave.TELEFONE
    assert chave.valor_normalizado == '+5511987654321'


def test_celular_formatado():
    assert normalizar_chave('(11) 98765-4321') == '+5511987654321'


def test_celular_com_mais_mantem_digitos():
    assert normalizar_chave('+11987654321') == '+11987654321'


def test_telefone_fixo_dez_digitos():
    chave = classificar_chave('1133334444')

    assert chave.tipo == TipoChave.TELEFONE
    assert chave.valor_normalizado == '+551133334444'


def test_celular_com_ddi_completo():
    chave = classificar_chave('+55 11 98765-4321')

    assert chave.tipo == TipoChave.OUTRA
    assert chave.valor_normalizado == '+5511987654321'


def test_cnpj_vira_so_digitos():
    chave = classificar_chave('11.222.333/0001-81')

    assert chave.tipo == TipoChave.CNPJ
    assert chave.valor_normalizado == '11222333000181'


def test_digitos_repetidos_passam_como_cpf():
    chave = classificar_chave('11111111111')

    assert chave.tipo == TipoChave.CPF
    assert chave.valor_normalizado == '11111111111'


def test_chave_sem_digitos_nao_levanta_erro():
    chave = classificar_chave('abc')

    assert chave.tipo == TipoChave.OUTRA
    assert chave.valor_normalizado == ''


@pytest.mark.parametrize('cpf, esperado', [
    ('11144477735', True),
    ('52998224725', True),
    ('11144477734', False),
    ('11987654321', False),
    ('1114447773', False),
    ('1114447773a', False),
])
def test_validar_cpf(cpf, esperado):
    assert validar_cpf(cpf) is esperado


def test_digitos_nao_ascii_sao_descartados():
    chave = classificar_chave('１１１４４４７７７３５')

    assert chave.tipo == TipoChave.OUTRA
    assert chave.valor_normalizado == ''


def test_digitos_arabes_nao_contam_como_cpf():
    assert validar_cpf('١١١٤٤٤٧٧٧٣٥') is False
    assert validar_cpf('１１１４４４７７７３５') is False


def test_digitos_ascii_misturados_com_nao_ascii():
    chave = classificar_chave('１133334444')

    assert chave.valor_normalizado == '133334444'
    assert chave.valor_normalizado.isascii()
