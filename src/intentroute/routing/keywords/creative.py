"""Keywords for suggestions, opinions and creative writing."""

CREATIVE_KEYWORDS: tuple[str, ...] = (
    # Suggestions & Recommendations
    "sugira", "sugerir", "recomende", "recomendar", "indique", "indicar", "indicação",
    "recomendação", "sugestão", "dica", "dicas", "conselho", "conselhos", "orientação",
    "orientações", "proponha", "propor", "proposta", "opções", "alternativas", "possibilidades",
    "ideias para", "inspiração para", "roteiro para", "guia para", "manual para", "tutorial para",
    "passo a passo", "como fazer", "diy", "faça você mesmo", "receita", "modo de preparo",
    "lista de", "top 10", "melhores", "piores", "ranking", "seleção", "curadoria",
    "bebida", "bebidas", "drink", "drinks", "coquetel", "coquetéis", "cocktail", "cocktails",
    "drink para", "bebida para", "sugestão de drink", "sugestão de bebida",

    # Opinions & Perspectives
    "opinião", "opiniões", "o que você acha", "o que pensa", "qual sua opinião", "na sua opinião",
    "na sua visão", "do seu ponto de vista", "pensamento", "pensamentos", "visão", "perspectiva",
    "ponto de vista", "achismo", "achou", "acha", "pensa", "pensou", "considera", "considerou",
    "julga", "julgou", "acredita", "acreditou", "crê", "crer", "supõe", "supor", "imagina",
    "imaginar", "sente", "sentir", "percebe", "perceber", "entende", "entender", "interpreta",
    "interpretar", "analisa", "analisar", "avalia", "avaliar", "critica", "criticar",

    # Creative Writing & Generation
    "crie", "criar", "imagine", "imaginar", "invente", "inventar", "desenvolva", "desenvolver",
    "elabore", "elaborar", "construa", "construir", "formule", "formular", "proponha", "propor",
    "criativo", "criatividade", "original", "originalidade", "inovador", "inovação",
    "escreva", "escrever", "redija", "redigir", "componha", "compor", "narre", "narrar",
    "conte", "contar", "relate", "relatar", "descreva", "descrever", "poema", "poesia",
    "verso", "estrofe", "rima", "soneto", "haicai", "crônica", "conto", "fábula", "lenda",
    "mito", "história", "romance", "novela", "roteiro", "script", "diálogo", "monólogo",
    "carta", "email", "mensagem", "texto", "artigo", "ensaio", "resenha", "sinopse",
    "slogan", "tagline", "manchete", "título", "nome", "marca", "logo", "design",

    # Brainstorming & Ideation
    "ideias", "ideia", "possibilidades", "possibilidade", "alternativas", "alternativa", "opções",
    "opção", "escolhas", "escolha", "variantes", "variante", "opções disponíveis", "soluções",
    "solução", "abordagens", "abordagem", "estratégias", "estratégia", "métodos", "método",
    "táticas", "tática", "técnicas", "técnica", "ferramentas", "ferramenta", "recursos",
    "recurso", "meios", "meio", "caminhos", "caminho", "vias", "via", "modos", "modo",
    "maneiras", "maneira", "formas", "forma", "estilos", "estilo", "tipos", "tipo",
    "brainstorm", "brainstorming", "tempestade de ideias", "mapa mental", "fluxograma",
    "esquema", "rascunho", "esboço", "plano", "planejamento", "projeto", "protótipo",

    # Home & Lifestyle
    "casa", "decoração", "design de interiores", "jardinagem", "plantas", "culinária", "receita", "gastronomia", "limpeza", "organização", "diy", "faça você mesmo", "artesanato", "moda", "estilo", "beleza", "maquiagem", "skincare",
    "sala", "quarto", "cozinha", "banheiro", "varanda", "jardim", "quintal", "móveis", "eletrodomésticos",
    "faxina", "arrumação", "minimalismo", "feng shui", "paisagismo", "horta", "pomar",
    "vestuário", "roupa", "sapato", "acessório", "tendência de moda", "look", "outfit",
    "cabelo", "pele", "unha", "perfume", "cosmético", "dermocosmético", "rotina de beleza",
)
