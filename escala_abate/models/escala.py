"""Modelo Escala: abate agendado (ou realizado) ligando produtor e planta.

O status é texto livre; a lista em core.constants é apenas convenção da UI.
"""
from escala_abate.core.database import db
from escala_abate.core.constants import STATUS_PADRAO
from escala_abate.core.datas import formatar_data_iso

class Escala(db.Model):
    __tablename__ = 'escala'  # Nome da tabela no banco de dados
    id = db.Column(db.Integer, primary_key=True)  # Identificador único da escala
    data_abate = db.Column(db.DateTime, nullable=False, index=True)  # Data/hora do abate (UTC)
    volume = db.Column(db.Integer, nullable=False)  # Quantidade de cabeças
    status = db.Column(db.String(50), nullable=False, default=STATUS_PADRAO)  # Rótulo do ciclo de vida
    observacoes = db.Column(db.Text, nullable=True)  # Observações livres
    produtor_id = db.Column(db.Integer, db.ForeignKey('produtor.id'), nullable=False)  # Produtor relacionado
    planta_id = db.Column(db.Integer, db.ForeignKey('planta.id'), nullable=False)  # Planta relacionada
    produtor = db.relationship('Produtor', backref='escalas')  # Relacionamento com Produtor
    planta = db.relationship('Planta', backref='escalas')  # Relacionamento com Planta

    # Nome do campo na API -> atributo do modelo
    CAMPOS_API = {
        'dataAbate': 'data_abate',
        'volume': 'volume',
        'status': 'status',
        'observacoes': 'observacoes',
        'produtorId': 'produtor_id',
        'plantaId': 'planta_id',
    }

    def to_dict(self) -> dict:
        """Visão desnormalizada (escala + produtor + planta)."""
        return {
            'id': self.id,
            'dataAbate': formatar_data_iso(self.data_abate),
            'volume': self.volume,
            'status': self.status,
            'observacoes': self.observacoes,
            'produtorId': self.produtor_id,
            'plantaId': self.planta_id,
            'produtor': self.produtor.to_dict() if self.produtor else None,
            'planta': self.planta.to_dict() if self.planta else None,
        }

    def __repr__(self):
        return f'<Escala {self.id} {self.status}>'
