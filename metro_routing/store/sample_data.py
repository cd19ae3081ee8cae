# 데이터 파일이 없을 때 사용하는 내장 샘플 노선망 (상파울루)
# 형식은 data/stations.json, data/lines.json 과 동일

SAMPLE_STATIONS = [
    {"id": "se", "name": "Sé", "coords": [-23.55, -46.63], "lines": ["linha-1-azul", "linha-3-vermelha"]},
    {
        "id": "luz",
        "name": "Luz",
        "coords": [-23.5343, -46.6345],
        "lines": ["linha-1-azul", "linha-7-rubi", "linha-11-coral", "linha-4-amarela"],
    },
    {"id": "jabaquara", "name": "Jabaquara", "coords": [-23.65, -46.64], "lines": ["linha-1-azul"]},
    {"id": "tucuruvi", "name": "Tucuruvi", "coords": [-23.48, -46.60], "lines": ["linha-1-azul"]},
    # Linha 11-Coral (CPTM), coordenadas aproximadas
    {"id": "bras", "name": "Brás", "coords": [-23.54521834862633, -46.61611052813644], "lines": ["linha-11-coral"]},
    {"id": "tatuape", "name": "Tatuapé", "coords": [-23.54022376294034, -46.57640274733506], "lines": ["linha-11-coral"]},
    {"id": "corinthians-itaquera", "name": "Corinthians-Itaquera", "coords": [-23.5424, -46.4718], "lines": ["linha-11-coral"]},
    {"id": "dom-bosco", "name": "Dom Bosco", "coords": [-23.54180631364945, -46.448143324603144], "lines": ["linha-11-coral"]},
    {"id": "jose-bonifacio", "name": "José Bonifácio", "coords": [-23.539064851664353, -46.431699699301355], "lines": ["linha-11-coral"]},
    {"id": "guaianases", "name": "Guaianases", "coords": [-23.54227047133191, -46.415620733841095], "lines": ["linha-11-coral"]},
    {"id": "antonio-gianetti-neto", "name": "Antônio Gianetti Neto", "coords": [-23.554390613726426, -46.383614189663895], "lines": ["linha-11-coral"]},
    {"id": "ferraz-de-vasconcelos", "name": "Ferraz de Vasconcelos", "coords": [-23.540699970980636, -46.368283562676496], "lines": ["linha-11-coral"]},
    {"id": "poa", "name": "Poá", "coords": [-23.52543444901898, -46.34359481637673], "lines": ["linha-11-coral"]},
    {"id": "calmon-viana", "name": "Calmon Viana", "coords": [-23.5253878046452, -46.333255205006324], "lines": ["linha-11-coral"]},
    {"id": "suzano", "name": "Suzano", "coords": [-23.534156746739416, -46.30795280579012], "lines": ["linha-11-coral"]},
    {"id": "jundiapeba", "name": "Jundiapeba", "coords": [-23.542781007234083, -46.258104891511884], "lines": ["linha-11-coral"]},
    {"id": "bras-cubas", "name": "Brás Cubas", "coords": [-23.536310469998863, -46.22518073384136], "lines": ["linha-11-coral"]},
    {"id": "mogi-das-cruzes", "name": "Mogi das Cruzes", "coords": [-23.5224, -46.1924], "lines": ["linha-11-coral"]},
    {"id": "estudantes", "name": "Estudantes", "coords": [-23.5215, -46.1771], "lines": ["linha-11-coral"]},
]

SAMPLE_LINES = [
    {"id": "linha-1-azul", "name": "Linha 1 - Azul", "color": "#0056d6", "stations": ["jabaquara", "se", "luz", "tucuruvi"]},
    {"id": "linha-3-vermelha", "name": "Linha 3 - Vermelha", "color": "#e50000", "stations": ["se"]},
    {"id": "linha-7-rubi", "name": "Linha 7 - Rubi", "color": "#b02a24", "stations": ["luz"]},
    {
        "id": "linha-11-coral",
        "name": "Linha 11 - Coral",
        "color": "#ff7f00",
        "stations": [
            "luz",
            "bras",
            "tatuape",
            "corinthians-itaquera",
            "dom-bosco",
            "jose-bonifacio",
            "guaianases",
            "antonio-gianetti-neto",
            "ferraz-de-vasconcelos",
            "poa",
            "calmon-viana",
            "suzano",
            "jundiapeba",
            "bras-cubas",
            "mogi-das-cruzes",
            "estudantes",
        ],
    },
    {"id": "linha-4-amarela", "name": "Linha 4 - Amarela", "color": "#ffd400", "stations": ["luz"]},
]
