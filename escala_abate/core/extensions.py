"""
Módulo Central de Extensões.
Evita importações circulares centralizando as instâncias das extensões.
"""
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# 1. Limiter (Rate Limiting)
# Os limites padrão vêm de RATELIMIT_DEFAULT no config.
limiter = Limiter(
    key_func=get_remote_address,
    # Em produção, idealmente usar Redis. Para dev/demo, memória é ok.
    storage_uri="memory://"
)

# 2. CORS (frontend servido em outra origem)
cors = CORS()
