"""Keywords for questions that need fresh information from the web."""

WEB_SEARCH_KEYWORDS: tuple[str, ...] = (
    # News & Current Events
    "notícia", "notícias", "últimas notícias", "última", "últimas", "manchete", "manchetes",
    "jornal", "noticiário", "última hora", "breaking news", "news", "o que está acontecendo",
    "aconteceu hoje", "acontecendo agora", "ao vivo", "tempo real",

    # Time-Sensitive Markers
    "hoje", "agora", "neste momento", "atual", "atualmente", "recente", "recentes",
    "recentemente", "ultimamente", "ontem", "amanhã", "esta semana", "essa semana",
    "este mês", "esse mês", "nesta semana", "neste fim de semana",

    # Weather
    "previsão do tempo", "previsão", "clima hoje", "temperatura", "vai chover", "chuva",
    "chover", "umidade", "frente fria", "onda de calor",

    # Sports
    "placar", "jogo de hoje", "resultado do jogo", "campeonato", "brasileirão", "copa",
    "libertadores", "escalação", "quem ganhou", "próximo jogo", "tabela do campeonato",
    "classificação do campeonato", "gol", "gols",

    # Markets & Prices
    "cotação", "cotações", "dólar hoje", "bolsa de valores", "ibovespa", "bitcoin",
    "criptomoeda", "preço", "preços", "inflação", "selic", "ações da",

    # Traffic, Places & Opening Hours
    "trânsito", "engarrafamento", "perto de mim", "aberto agora", "horário de funcionamento",
    "está aberto", "fecha que horas", "abre que horas", "posto de gasolina",

    # Events & Releases
    "eleição", "eleições", "pesquisa eleitoral", "lançamento", "lançamentos", "estreia",
    "em cartaz", "programação", "show", "shows", "evento", "eventos",

    # Explicit Search Requests
    "pesquise na internet", "busque na internet", "procure na internet", "pesquise na web",
    "na internet", "online", "google", "site oficial",
)
