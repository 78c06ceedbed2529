"""Reference geography: known cities and points of interest around them.

City order matters: resolution returns the first city whose name is contained
in the query.
"""

KNOWN_CITIES: list[dict] = [
    {"name": "Salvador", "country": "BR", "latitude": -12.9711, "longitude": -38.5108},
    {"name": "Rio de Janeiro", "country": "BR", "latitude": -22.9068, "longitude": -43.1729},
    {"name": "São Paulo", "country": "BR", "latitude": -23.5505, "longitude": -46.6333},
    {"name": "Recife", "country": "BR", "latitude": -8.0476, "longitude": -34.8770},
    {"name": "Fortaleza", "country": "BR", "latitude": -3.7319, "longitude": -38.5267},
    {"name": "Brasília", "country": "BR", "latitude": -15.7801, "longitude": -47.9292},
]

# Prices in BRL; None means free entry is not guaranteed but no ticket is sold.
POINTS_OF_INTEREST: list[dict] = [
    # Salvador
    {"id": "sal-porto-da-barra", "name": "Praia do Porto da Barra", "category": "beach",
     "latitude": -13.0036, "longitude": -38.5326, "rating": 4.8, "price": "0",
     "types": ["attraction"]},
    {"id": "sal-itapua", "name": "Praia de Itapuã", "category": "beach",
     "latitude": -12.9563, "longitude": -38.3596, "rating": 4.6, "price": "0",
     "types": ["nature"]},
    {"id": "sal-pelourinho", "name": "Pelourinho", "category": "culture",
     "latitude": -12.9714, "longitude": -38.5100, "rating": 4.8, "price": "0",
     "types": ["attraction", "history"]},
    {"id": "sal-farol-da-barra", "name": "Farol da Barra", "category": "landmark",
     "latitude": -13.0104, "longitude": -38.5324, "rating": 4.7, "price": "15",
     "types": ["attraction", "culture"]},
    {"id": "sal-elevador-lacerda", "name": "Elevador Lacerda", "category": "landmark",
     "latitude": -12.9745, "longitude": -38.5133, "rating": 4.5, "price": "0.15",
     "types": ["attraction"]},
    {"id": "sal-mercado-modelo", "name": "Mercado Modelo", "category": "food",
     "latitude": -12.9730, "longitude": -38.5135, "rating": 4.4, "price": "0",
     "types": ["shopping", "attraction"]},
    {"id": "sal-museu-afro", "name": "Museu Afro-Brasileiro", "category": "culture",
     "latitude": -12.9719, "longitude": -38.5094, "rating": 4.5, "price": "10",
     "types": ["museum"]},
    {"id": "sal-rio-vermelho", "name": "Rio Vermelho", "category": "nightlife",
     "latitude": -13.0120, "longitude": -38.4900, "rating": 4.6, "price": None,
     "types": ["food"]},
    # Rio de Janeiro
    {"id": "rio-cristo-redentor", "name": "Cristo Redentor", "category": "landmark",
     "latitude": -22.9519, "longitude": -43.2105, "rating": 4.9, "price": "97.50",
     "types": ["attraction", "culture"]},
    {"id": "rio-pao-de-acucar", "name": "Pão de Açúcar", "category": "adventure",
     "latitude": -22.9492, "longitude": -43.1545, "rating": 4.8, "price": "195",
     "types": ["attraction", "nature"]},
    {"id": "rio-copacabana", "name": "Praia de Copacabana", "category": "beach",
     "latitude": -22.9711, "longitude": -43.1822, "rating": 4.7, "price": "0",
     "types": ["attraction"]},
    {"id": "rio-ipanema", "name": "Praia de Ipanema", "category": "beach",
     "latitude": -22.9868, "longitude": -43.2045, "rating": 4.8, "price": "0",
     "types": []},
    {"id": "rio-museu-do-amanha", "name": "Museu do Amanhã", "category": "culture",
     "latitude": -22.8943, "longitude": -43.1797, "rating": 4.6, "price": "30",
     "types": ["museum"]},
    {"id": "rio-jardim-botanico", "name": "Jardim Botânico", "category": "nature",
     "latitude": -22.9674, "longitude": -43.2246, "rating": 4.7, "price": "67",
     "types": []},
    {"id": "rio-lapa", "name": "Arcos da Lapa", "category": "nightlife",
     "latitude": -22.9135, "longitude": -43.1803, "rating": 4.4, "price": None,
     "types": ["culture"]},
    # São Paulo
    {"id": "sp-masp", "name": "MASP", "category": "culture",
     "latitude": -23.5614, "longitude": -46.6558, "rating": 4.7, "price": "70",
     "types": ["museum", "attraction"]},
    {"id": "sp-ibirapuera", "name": "Parque Ibirapuera", "category": "nature",
     "latitude": -23.5874, "longitude": -46.6576, "rating": 4.8, "price": "0",
     "types": ["attraction"]},
    {"id": "sp-mercadao", "name": "Mercado Municipal", "category": "food",
     "latitude": -23.5417, "longitude": -46.6293, "rating": 4.6, "price": "0",
     "types": ["attraction"]},
    {"id": "sp-pinacoteca", "name": "Pinacoteca", "category": "culture",
     "latitude": -23.5342, "longitude": -46.6339, "rating": 4.7, "price": "30",
     "types": ["museum"]},
    {"id": "sp-vila-madalena", "name": "Vila Madalena", "category": "nightlife",
     "latitude": -23.5564, "longitude": -46.6914, "rating": 4.5, "price": None,
     "types": ["food"]},
    # Recife
    {"id": "rec-boa-viagem", "name": "Praia de Boa Viagem", "category": "beach",
     "latitude": -8.1187, "longitude": -34.8992, "rating": 4.5, "price": "0",
     "types": ["attraction"]},
    {"id": "rec-marco-zero", "name": "Marco Zero", "category": "culture",
     "latitude": -8.0631, "longitude": -34.8711, "rating": 4.6, "price": "0",
     "types": ["attraction", "history"]},
    {"id": "rec-brennand", "name": "Instituto Ricardo Brennand", "category": "culture",
     "latitude": -8.0658, "longitude": -34.9602, "rating": 4.9, "price": "60",
     "types": ["museum"]},
    # Fortaleza
    {"id": "for-praia-do-futuro", "name": "Praia do Futuro", "category": "beach",
     "latitude": -3.7430, "longitude": -38.4570, "rating": 4.6, "price": "0",
     "types": ["attraction"]},
    {"id": "for-beira-mar", "name": "Feirinha da Beira Mar", "category": "food",
     "latitude": -3.7250, "longitude": -38.4980, "rating": 4.5, "price": "0",
     "types": ["shopping", "beach"]},
    {"id": "for-dragao-do-mar", "name": "Centro Dragão do Mar", "category": "culture",
     "latitude": -3.7218, "longitude": -38.5207, "rating": 4.6, "price": "0",
     "types": ["attraction", "nightlife"]},
    # Brasília
    {"id": "bsb-catedral", "name": "Catedral de Brasília", "category": "culture",
     "latitude": -15.7983, "longitude": -47.8755, "rating": 4.8, "price": "0",
     "types": ["attraction"]},
    {"id": "bsb-congresso", "name": "Congresso Nacional", "category": "landmark",
     "latitude": -15.7997, "longitude": -47.8641, "rating": 4.7, "price": "0",
     "types": ["attraction", "culture"]},
    {"id": "bsb-parque-da-cidade", "name": "Parque da Cidade", "category": "nature",
     "latitude": -15.8007, "longitude": -47.9095, "rating": 4.6, "price": "0",
     "types": []},
    {"id": "bsb-pontao", "name": "Pontão do Lago Sul", "category": "food",
     "latitude": -15.8283, "longitude": -47.8731, "rating": 4.6, "price": None,
     "types": ["nightlife"]},
]
