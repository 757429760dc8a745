from dataclasses import dataclass
from enum import Enum
import logging
import re


logger = logging.getLogger(__name__)


class TipoChave(Enum):
    EMAIL = 'email'
    ALEATORIA = 'aleatoria'
    TELEFONE = 'telefone'
    CPF = 'cpf'
    CNPJ = 'cnpj'
    OUTRA = 'outra'


@dataclass(frozen=True)
class ChavePix:
    bruta: str
    tipo: TipoChave
    valor_normalizado: str


UUID = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$',
    re.IGNORECASE
)

NAO_DIGITOS = re.compile(r'[^0-9]')
ONZE_DIGITOS = re.compile(r'[0-9]{11}')


def validar_cpf(digitos: str) -> bool:
    if not ONZE_DIGITOS.fullmatch(digitos):
        return False

    numeros = [int(d) for d in digitos]

    for posicao in (9, 10):
        soma = sum(
            numero * peso
            for numero, peso in zip(numeros[:posicao],
                                    range(posicao + 1, 1, -1))
        )
        digito = (soma * 10) % 11 % 10

        if digito != numeros[posicao]:
            return False

    return True


def _telefone(digitos: str, tem_mais: bool) -> str:
    if tem_mais:
        return f'+{digitos}'
    return f'+55{digitos}'


def classificar_chave(chave: str) -> ChavePix:
    '''
    Identifica o tipo da chave PIX e devolve o valor exato que vai
    no campo 01 do BR Code.

    Nunca levanta erro: chaves que não se encaixam em nenhum formato
    conhecido viram apenas dígitos. Onze dígitos com dígito
    verificador de CPF válido são CPF; caso contrário, celular.
    '''
    bruta = chave or ''
    limpa = bruta.strip()

    if '@' in limpa:
        return ChavePix(bruta, TipoChave.EMAIL, limpa)

    if UUID.match(limpa):
        return ChavePix(bruta, TipoChave.ALEATORIA, limpa)

    tem_mais = limpa.startswith('+')
    digitos = NAO_DIGITOS.sub('', limpa)

    if len(digitos) == 11:
        if validar_cpf(digitos):
            return ChavePix(bruta, TipoChave.CPF, digitos)

        logger.debug('Onze dígitos sem CPF válido, tratando como celular.')
        return ChavePix(bruta, TipoChave.TELEFONE,
                        _telefone(digitos, tem_mais))

    if len(digitos) == 10:
        return ChavePix(bruta, TipoChave.TELEFONE,
                        _telefone(digitos, tem_mais))

    tipo = TipoChave.CNPJ if len(digitos) == 14 else TipoChave.OUTRA
    valor = f'+{digitos}' if tem_mais else digitos

    return ChavePix(bruta, tipo, valor)


def normalizar_chave(chave: str) -> str:
    return classificar_chave(chave).valor_normalizado
