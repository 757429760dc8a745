class ErroPix(ValueError):
    '''
    Erro de validação ao gerar um BR Code PIX.

    `mensagem` é o texto devolvido ao usuário para que ele corrija
    o campo informado.
    '''
    mensagem = 'Dados inválidos para gerar o PIX!'

    def __init__(self, mensagem=None):
        if mensagem:
            self.mensagem = mensagem
        super().__init__(self.mensagem)


class ChaveVazia(ErroPix):
    mensagem = 'Chave PIX não informada!'


class ValorInvalido(ErroPix):
    mensagem = 'Valor inválido! Informe um número decimal não negativo.'


class CampoMuitoLongo(ErroPix):
    mensagem = 'Campo do PIX excede 99 caracteres!'
