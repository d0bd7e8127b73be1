"""Keywords for calculations, unit conversions and math vocabulary."""

MATHEMATICAL_KEYWORDS: tuple[str, ...] = (
    # Calculation & Operations
    "calcule", "calcular", "conversão", "converter", "quanto é", "quanto dá", "qual o resultado",
    "resultado", "soma", "somar", "subtração", "subtrair", "multiplicação", "multiplicar",
    "divisão", "dividir", "potência", "raiz", "porcentagem", "percentual", "por cento", "%",
    "calcule o valor", "qual o valor", "quanto custa", "quanto vale", "quanto representa",
    "mais", "menos", "vezes", "dividido por", "elevado a", "raiz quadrada", "raiz cúbica",
    "logaritmo", "seno", "cosseno", "tangente", "fatorial", "derivada", "integral", "limite",
    "matriz", "vetor", "determinante", "sistema linear", "equação diferencial", "polinômio",
    "fração", "número misto", "dízima periódica", "número primo", "mdc", "mmc", "divisores",
    "múltiplos", "resto", "quociente", "dividendo", "divisor", "parcela", "fator", "produto",

    # Units & Measurements
    "quilômetro", "km", "metro", "m", "centímetro", "cm", "milímetro", "mm", "quilograma", "kg",
    "grama", "g", "litro", "l", "mililitro", "ml", "graus", "celsius", "fahrenheit", "real",
    "reais", "dólar", "dólares", "euro", "euros", "libra", "peso", "converter para",
    "equivalente a", "corresponde a", "equivale a", "transformar em", "passar para",
    "polegada", "pé", "jarda", "milha", "légua", "onça", "libra", "arroba", "hectare",
    "alqueire", "acre", "galão", "barril", "pint", "quart", "kelvin", "rankine",
    "segundo", "minuto", "hora", "dia", "semana", "mês", "ano", "década", "século", "milênio",
    "joule", "caloria", "watt", "cavalo-vapor", "hp", "volt", "ampere", "ohm", "hertz",
    "byte", "kilobyte", "megabyte", "gigabyte", "terabyte", "petabyte", "bit", "pixel",

    # Math Terms & Areas
    "equação", "fórmula", "cálculo", "matemática", "aritmética", "álgebra", "geometria",
    "trigonometria", "estatística", "probabilidade", "média", "mediana", "moda", "desvio padrão",
    "variância", "regra de três", "proporção", "razão", "fração", "decimal", "inteiro", "número", "números",
    "teorema", "axioma", "postulado", "hipótese", "conjectura", "lema", "corolário", "prova",
    "demonstração", "lógica", "conjunto", "subconjunto", "união", "interseção", "diferença",
    "complementar", "função", "domínio", "imagem", "contradomínio", "gráfico", "eixo",
    "abscissa", "ordenada", "plano cartesiano", "polígono", "triângulo", "quadrado", "retângulo",
    "círculo", "circunferência", "elipse", "parábola", "hipérbole", "esfera", "cubo", "cilindro",
    "cone", "pirâmide", "prisma", "poliedro", "ângulo", "grau", "radiano", "pi",

    # Financial Math
    "juros simples", "juros compostos", "montante", "capital", "taxa", "tempo", "período",
    "amortização", "tabela price", "tabela sac", "vpl", "tir", "payback", "fluxo de caixa",
    "desconto", "abatimento", "acréscimo", "multa", "mora", "correção monetária", "indexador",

    # Advanced Math
    "cálculo", "derivada", "integral", "limite", "álgebra linear", "matriz", "vetor", "autovalor", "autovetor", "estatística", "probabilidade", "distribuição normal", "variância", "desvio padrão", "regressão", "teorema", "geometria analítica",
    "topologia", "teoria dos números", "combinatória", "teoria dos grafos", "criptografia", "algoritmo", "complexidade",
    "série", "sequência", "progressão aritmética", "progressão geométrica", "pa", "pg",
)
