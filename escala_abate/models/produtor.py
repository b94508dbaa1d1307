# Modelo Produtor: fornecedor de animais (dado de referência)
from escala_abate.core.database import db

class Produtor(db.Model):
    __tablename__ = 'produtor'  # Nome da tabela no banco de dados
    id = db.Column(db.Integer, primary_key=True)  # Identificador único do produtor
    nome = db.Column(db.String(150), unique=True, nullable=False)  # Nome único (chave do upsert)
    email = db.Column(db.String(150), nullable=True)  # E-mail de contato
    telefone = db.Column(db.String(30), nullable=True)  # Telefone de contato

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'nome': self.nome,
            'email': self.email,
            'telefone': self.telefone,
        }

    def __repr__(self):
        return f'<Produtor {self.nome}>'  # Representação legível para debug
