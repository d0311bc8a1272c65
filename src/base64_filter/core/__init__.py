"""
Core do Base64 Filter.

Este pacote reúne as responsabilidades independentes do codec:

    - config     → resolução de configuração (merge, validação, hashing)
    - pipeline   → entradas, coleção, contexto de diagnóstico e tipos de resultado
    - contract   → descritor estático de capacidades do filtro
    - errors     → payloads canônicos de erro/aviso
    - exceptions → exceções tipadas (codec e fases)

Limites explícitos:
    - Não define armazenamento nem ordem de iteração da coleção hospedeira
    - Não registra o filtro em nenhum host
"""
