# Importação dos modelos para registro no SQLAlchemy
from escala_abate.core.database import db

from .produtor import Produtor
from .planta import Planta
from .escala import Escala
