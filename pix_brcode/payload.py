from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pix_brcode.excecoes import ValorInvalido
from pix_brcode.tlv import codificar_campo
from typing import Optional
import unicodedata
import logging
import re


logger = logging.getLogger(__name__)


GUI_PIX = 'BR.GOV.BCB.PIX'
TAMANHO_NOME = 25
TAMANHO_CIDADE = 15

# Sem txid por transação: o campo 62/05 é sempre "***".
REFERENCIA_ESTATICA = '***'

PREFIXO_CRC = '6304'

CENTAVOS = Decimal('0.01')

FORA_DO_CHARSET = re.compile(r'[^A-Z0-9 ]')


@dataclass(frozen=True)
class DadosComerciante:
    nome: str
    cidade: str
    codigo_pais: str = 'BR'
    categoria: str = '0000'
    moeda: str = '986'


def sanitizar_texto(texto: Optional[str], tamanho_max: int) -> str:
    '''
    Restringe nome e cidade do recebedor ao charset aceito pelo BR Code:
    remove acentos, passa para maiúsculas, descarta tudo fora de
    [A-Z0-9 ] e corta em `tamanho_max` caracteres.

    Espaços são preservados. Se o resultado não tiver nenhum caractere
    além de espaços, quem chama decide o valor padrão.
    '''
    decomposto = unicodedata.normalize('NFD', texto or '')
    sem_acentos = ''.join(
        c for c in decomposto if not unicodedata.combining(c))

    limpo = FORA_DO_CHARSET.sub('', sem_acentos.upper())

    return limpo[:tamanho_max]


def normalizar_valor(valor) -> Optional[Decimal]:
    '''
    Converte o valor da cobrança para Decimal com duas casas.

    None ou texto em branco significam cobrança sem valor definido.
    '''
    if valor is None:
        return None

    if isinstance(valor, str) and not valor.strip():
        return None

    if isinstance(valor, bool):
        raise ValorInvalido()

    try:
        decimal = Decimal(str(valor).strip())

        if not decimal.is_finite() or decimal < 0:
            raise InvalidOperation

        return decimal.quantize(CENTAVOS, rounding=ROUND_HALF_UP).copy_abs()
    except InvalidOperation:
        logger.warning(f'Valor inválido para o PIX: {valor!r}')
        raise ValorInvalido()


def formatar_valor(valor: Decimal) -> str:
    return f"{valor.quantize(CENTAVOS, rounding=ROUND_HALF_UP):f}"


def montar_payload(
        chave_normalizada: str,
        valor: Optional[Decimal],
        comerciante: DadosComerciante
) -> str:
    '''
    Monta o BR Code sem os dígitos do CRC, terminando em "6304".

    A ordem dos campos é fixa. Sem valor, o campo 54 é omitido e o
    app do pagador pede a quantia.
    '''
    conta = (
        codificar_campo("00", GUI_PIX) +
        codificar_campo("01", chave_normalizada)
    )

    campos = [
        codificar_campo("00", "01"),
        codificar_campo("26", conta),
        codificar_campo("52", comerciante.categoria),
        codificar_campo("53", comerciante.moeda),
    ]

    if valor is not None:
        campos.append(codificar_campo("54", formatar_valor(valor)))

    campos += [
        codificar_campo("58", comerciante.codigo_pais),
        codificar_campo("59", comerciante.nome),
        codificar_campo("60", comerciante.cidade),
        codificar_campo("62", codificar_campo("05", REFERENCIA_ESTATICA)),
    ]

    return ''.join(campos) + PREFIXO_CRC
