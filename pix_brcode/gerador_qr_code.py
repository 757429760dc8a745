from pix_brcode import config
from pix_brcode.chave_pix import ChavePix, classificar_chave
from pix_brcode.crc16 import calcular_crc16
from pix_brcode.excecoes import ChaveVazia
from pix_brcode.payload import (DadosComerciante, montar_payload,
                                normalizar_valor, sanitizar_texto,
                                TAMANHO_NOME, TAMANHO_CIDADE)
from urllib.parse import quote, urlencode
from typing import Optional, Tuple
import logging


logger = logging.getLogger(__name__)


def _sanitizar_com_padrao(texto, padrao, tamanho_max, fixo):
    for candidato in (texto, padrao):
        limpo = sanitizar_texto(candidato, tamanho_max)
        if limpo.strip():
            return limpo
    return fixo


def _dados_comerciante(nome: Optional[str],
                       cidade: Optional[str]) -> DadosComerciante:
    nome = _sanitizar_com_padrao(
        nome, config.NOME_PADRAO, TAMANHO_NOME, 'PROFISSIONAL')
    cidade = _sanitizar_com_padrao(
        cidade, config.CIDADE_PADRAO, TAMANHO_CIDADE, 'SAO PAULO')

    return DadosComerciante(nome=nome, cidade=cidade)


def _gerar(chave, valor, nome, cidade) -> Tuple[ChavePix, str]:
    if chave is None or not chave.strip():
        raise ChaveVazia()

    valor = normalizar_valor(valor)

    chave_pix = classificar_chave(chave)
    if not chave_pix.valor_normalizado:
        raise ChaveVazia('Chave PIX sem nenhum caractere válido!')

    comerciante = _dados_comerciante(nome, cidade)

    payload = montar_payload(chave_pix.valor_normalizado, valor, comerciante)
    crc = calcular_crc16(payload)

    logger.debug(f'BR Code gerado com CRC {crc}.')
    return chave_pix, payload + crc


def gerar_payload_pix(
        chave: str,
        valor=None,
        nome: Optional[str] = None,
        cidade: Optional[str] = None
) -> str:
    '''
    Gera payload PIX Cópia e Cola conforme padrão BACEN (EMV-Co)

    Chave e valor são validados antes de qualquer campo ser montado;
    nome e cidade vazios caem nos valores padrão.
    '''
    return _gerar(chave, valor, nome, cidade)[1]


def gerar_cobranca_pix(
        chave: str,
        valor=None,
        nome: Optional[str] = None,
        cidade: Optional[str] = None
) -> dict:
    chave_pix, payload = _gerar(chave, valor, nome, cidade)

    return {
        'payload': payload,
        'tipo_chave': chave_pix.tipo.value,
        'qr_code_url': montar_url_qr_code(payload)
    }


def montar_url_qr_code(payload: str, tamanho: Optional[int] = None) -> str:
    '''
    URL do serviço externo que renderiza o payload como imagem PNG.
    '''
    tamanho = tamanho or config.QR_CODE_TAMANHO
    query = urlencode({
        'size': f'{tamanho}x{tamanho}',
        'data': payload
    }, quote_via=quote)
    return f'{config.QR_CODE_API}?{query}'
