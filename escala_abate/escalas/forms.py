"""
Camada de Validação das Escalas (WTForms)

Os formulários recebem o corpo JSON embrulhado em MultiDict. Os campos
customizados exigem os tipos do JSON (inteiro é inteiro, texto é texto),
sem as coerções que o WTForms faz para formulários HTML.
"""

from dataclasses import dataclass, field
from typing import Any

from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import Field, IntegerField, StringField
from wtforms.validators import NumberRange, StopValidation

from escala_abate.core.datas import interpretar_data


# === VALIDADORES ===

class Obrigatorio:
    def __init__(self, message='Campo obrigatório'):
        self.message = message

    def __call__(self, form, field):
        if not field.raw_data:
            raise StopValidation(self.message)


class Opcional:
    """Pula a validação apenas quando a chave está ausente do payload."""
    field_flags = {'optional': True}

    def __call__(self, form, field):
        if not field.raw_data:
            field.errors[:] = []
            raise StopValidation()


# === CAMPOS JSON ===

class _CampoJson:
    """Se o tipo do valor já falhou, não roda os demais validadores."""

    def pre_validate(self, form):
        if self.process_errors:
            raise StopValidation()


class CampoInteiro(_CampoJson, IntegerField):
    def process_formdata(self, valuelist):
        if not valuelist:
            return
        valor = valuelist[0]
        # bool é subclasse de int em Python
        if isinstance(valor, bool) or not isinstance(valor, int):
            self.data = None
            raise ValueError('Esperado um número inteiro')
        self.data = valor


class CampoTexto(_CampoJson, StringField):
    def __init__(self, label=None, validators=None, aceita_nulo=False, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.aceita_nulo = aceita_nulo

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        valor = valuelist[0]
        if valor is None and self.aceita_nulo:
            self.data = None
            return
        if not isinstance(valor, str):
            raise ValueError('Esperado um texto')
        self.data = valor


class CampoData(_CampoJson, Field):
    """String ISO-8601 convertida para datetime naive em UTC."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        valor = valuelist[0]
        if not isinstance(valor, str):
            raise ValueError('Data inválida')
        try:
            self.data = interpretar_data(valor)
        except (ValueError, OverflowError):
            self.data = None
            raise ValueError('Data inválida')


POSITIVO = NumberRange(min=1, message='Deve ser um número inteiro positivo')


# === FORMULÁRIOS ===

class EscalaCriacaoForm(FlaskForm):
    class Meta:
        csrf = False  # API JSON sem sessão

    dataAbate = CampoData('Data do abate', validators=[Obrigatorio()])
    volume = CampoInteiro('Volume', validators=[Obrigatorio(), POSITIVO])
    status = CampoTexto('Status', validators=[Opcional()])
    observacoes = CampoTexto('Observações', validators=[Opcional()])
    produtorId = CampoInteiro('Produtor', validators=[Obrigatorio(), POSITIVO])
    plantaId = CampoInteiro('Planta', validators=[Obrigatorio(), POSITIVO])


class EscalaAtualizacaoForm(FlaskForm):
    """Atualização parcial: tudo opcional; observacoes aceita null (limpar)."""

    class Meta:
        csrf = False

    dataAbate = CampoData('Data do abate', validators=[Opcional()])
    volume = CampoInteiro('Volume', validators=[Opcional(), POSITIVO])
    status = CampoTexto('Status', validators=[Opcional()])
    observacoes = CampoTexto('Observações', validators=[Opcional()], aceita_nulo=True)
    produtorId = CampoInteiro('Produtor', validators=[Opcional(), POSITIVO])
    plantaId = CampoInteiro('Planta', validators=[Opcional(), POSITIVO])


# === RESULTADO ===

@dataclass
class ResultadoValidacao:
    """Sucesso com `dados` tipados, ou falha com `erros` por campo."""
    valido: bool
    dados: dict = field(default_factory=dict)
    erros: dict = field(default_factory=dict)


def _validar(form_cls, payload: Any) -> ResultadoValidacao:
    # FlaskForm lê current_app: chamar dentro de requisição ou app_context
    if not isinstance(payload, dict):
        return ResultadoValidacao(False, erros={'_schema': ['Esperado um objeto JSON']})

    # Lista de pares: um valor que seja lista continua sendo um único valor
    form = form_cls(formdata=MultiDict(list(payload.items())))
    if not form.validate():
        return ResultadoValidacao(False, erros=dict(form.errors))

    dados = {campo.name: campo.data for campo in form if campo.name in payload}
    return ResultadoValidacao(True, dados=dados)


def validar_criacao(payload: Any) -> ResultadoValidacao:
    return _validar(EscalaCriacaoForm, payload)


def validar_atualizacao(payload: Any) -> ResultadoValidacao:
    return _validar(EscalaAtualizacaoForm, payload)
