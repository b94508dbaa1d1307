# Modelo Planta: frigorífico/abatedouro (dado de referência)
from escala_abate.core.database import db

class Planta(db.Model):
    __tablename__ = 'planta'  # Nome da tabela no banco de dados
    id = db.Column(db.Integer, primary_key=True)  # Identificador único da planta
    nome = db.Column(db.String(150), unique=True, nullable=False)  # Nome único (chave do upsert)
    cidade = db.Column(db.String(100), nullable=False)  # Cidade da planta
    estado = db.Column(db.String(2), nullable=False)  # UF (ex.: 'GO')

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'nome': self.nome,
            'cidade': self.cidade,
            'estado': self.estado,
        }

    def __repr__(self):
        return f'<Planta {self.nome}>'  # Representação legível para debug
