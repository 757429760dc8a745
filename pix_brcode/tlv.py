from pix_brcode.excecoes import CampoMuitoLongo
import re


TAMANHO_MAXIMO = 99

_TAG = re.compile(r'^[0-9]{2}$')


def codificar_campo(tag: str, valor: str) -> str:
    '''
    Formata um campo EMV no padrão ID + tamanho (2 dígitos) + valor.

    Serve tanto para campos simples quanto para campos compostos,
    cujo valor já é uma concatenação de outros campos.
    '''
    if not _TAG.match(tag):
        raise ValueError(f'Tag EMV inválida: {tag!r}')

    if len(valor) > TAMANHO_MAXIMO:
        raise CampoMuitoLongo(
            f'Campo {tag} com {len(valor)} caracteres excede o limite de '
            f'{TAMANHO_MAXIMO}!')

    return f"{tag}{len(valor):02d}{valor}"
