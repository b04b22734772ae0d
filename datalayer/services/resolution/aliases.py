"""
Per-league team alias tables.

Keys are lowercase spellings seen across sources (bookmakers, news feeds,
user input); values are the names API-Sports uses. Table order matters: the
resolver's substring tier scans keys in insertion order and takes the first
hit.
"""
from typing import Dict, List

# NBA
NBA_ALIASES = {
    'atlanta hawks': 'Atlanta Hawks',
    'boston celtics': 'Boston Celtics',
    'brooklyn nets': 'Brooklyn Nets',
    'charlotte hornets': 'Charlotte Hornets',
    'chicago bulls': 'Chicago Bulls',
    'cleveland cavaliers': 'Cleveland Cavaliers',
    'dallas mavericks': 'Dallas Mavericks',
    'denver nuggets': 'Denver Nuggets',
    'detroit pistons': 'Detroit Pistons',
    'golden state warriors': 'Golden State Warriors',
    'houston rockets': 'Houston Rockets',
    'indiana pacers': 'Indiana Pacers',
    'los angeles clippers': 'Los Angeles Clippers',
    'la clippers': 'Los Angeles Clippers',
    'los angeles lakers': 'Los Angeles Lakers',
    'la lakers': 'Los Angeles Lakers',
    'memphis grizzlies': 'Memphis Grizzlies',
    'miami heat': 'Miami Heat',
    'milwaukee bucks': 'Milwaukee Bucks',
    'minnesota timberwolves': 'Minnesota Timberwolves',
    'new orleans pelicans': 'New Orleans Pelicans',
    'new york knicks': 'New York Knicks',
    'oklahoma city thunder': 'Oklahoma City Thunder',
    'orlando magic': 'Orlando Magic',
    'philadelphia 76ers': 'Philadelphia 76ers',
    'phoenix suns': 'Phoenix Suns',
    'portland trail blazers': 'Portland Trail Blazers',
    'sacramento kings': 'Sacramento Kings',
    'san antonio spurs': 'San Antonio Spurs',
    'toronto raptors': 'Toronto Raptors',
    'utah jazz': 'Utah Jazz',
    'washington wizards': 'Washington Wizards',
    'hawks': 'Atlanta Hawks',
    'celtics': 'Boston Celtics',
    'nets': 'Brooklyn Nets',
    'hornets': 'Charlotte Hornets',
    'bulls': 'Chicago Bulls',
    'cavaliers': 'Cleveland Cavaliers',
    'cavs': 'Cleveland Cavaliers',
    'mavericks': 'Dallas Mavericks',
    'mavs': 'Dallas Mavericks',
    'nuggets': 'Denver Nuggets',
    'pistons': 'Detroit Pistons',
    'warriors': 'Golden State Warriors',
    'dubs': 'Golden State Warriors',
    'rockets': 'Houston Rockets',
    'pacers': 'Indiana Pacers',
    'clippers': 'Los Angeles Clippers',
    'lakers': 'Los Angeles Lakers',
    'grizzlies': 'Memphis Grizzlies',
    'grizz': 'Memphis Grizzlies',
    'heat': 'Miami Heat',
    'bucks': 'Milwaukee Bucks',
    'timberwolves': 'Minnesota Timberwolves',
    'wolves': 'Minnesota Timberwolves',
    't-wolves': 'Minnesota Timberwolves',
    'pelicans': 'New Orleans Pelicans',
    'pels': 'New Orleans Pelicans',
    'knicks': 'New York Knicks',
    'thunder': 'Oklahoma City Thunder',
    'okc': 'Oklahoma City Thunder',
    'okc thunder': 'Oklahoma City Thunder',
    'magic': 'Orlando Magic',
    '76ers': 'Philadelphia 76ers',
    'sixers': 'Philadelphia 76ers',
    'philly': 'Philadelphia 76ers',
    'suns': 'Phoenix Suns',
    'trail blazers': 'Portland Trail Blazers',
    'blazers': 'Portland Trail Blazers',
    'kings': 'Sacramento Kings',
    'spurs': 'San Antonio Spurs',
    'raptors': 'Toronto Raptors',
    'jazz': 'Utah Jazz',
    'wizards': 'Washington Wizards',
    'wiz': 'Washington Wizards',
}

# Euroleague
EUROLEAGUE_ALIASES = {
    'fenerbahce': 'Fenerbahce',
    'fenerbahce beko': 'Fenerbahce',
    'fenerbahce beko istanbul': 'Fenerbahce',
    'anadolu efes': 'Anadolu Efes',
    'anadolu efes istanbul': 'Anadolu Efes',
    'efes': 'Anadolu Efes',
    'real madrid': 'Real Madrid',
    'real madrid baloncesto': 'Real Madrid',
    'barcelona': 'Barcelona',
    'fc barcelona': 'Barcelona',
    'barca': 'Barcelona',
    'baskonia': 'Baskonia',
    'saski baskonia': 'Baskonia',
    'td systems baskonia': 'Baskonia',
    'gran canaria': 'Gran Canaria',
    'dreamland gran canaria': 'Gran Canaria',
    'unicaja': 'Unicaja',
    'unicaja malaga': 'Unicaja',
    'olympiacos': 'Olympiacos',
    'olympiacos piraeus': 'Olympiacos',
    'panathinaikos': 'Panathinaikos',
    'panathinaikos athens': 'Panathinaikos',
    'pao': 'Panathinaikos',
    'olimpia milano': 'Olimpia Milano',
    'ea7 emporio armani milano': 'Olimpia Milano',
    'armani milano': 'Olimpia Milano',
    'ax armani exchange milano': 'Olimpia Milano',
    'milano': 'Olimpia Milano',
    'virtus bologna': 'Virtus Bologna',
    'virtus segafredo bologna': 'Virtus Bologna',
    'asvel': 'ASVEL',
    'ldlc asvel': 'ASVEL',
    'asvel villeurbanne': 'ASVEL',
    'lyon-villeurbanne': 'ASVEL',
    'paris basketball': 'Paris Basketball',
    'paris': 'Paris Basketball',
    'monaco': 'Monaco',
    'as monaco': 'Monaco',
    'bayern munich': 'Bayern Munich',
    'fc bayern munich': 'Bayern Munich',
    'bayern munchen': 'Bayern Munich',
    'alba berlin': 'Alba Berlin',
    'alba': 'Alba Berlin',
    'zalgiris': 'Zalgiris',
    'zalgiris kaunas': 'Zalgiris',
    'maccabi tel aviv': 'Maccabi Tel Aviv',
    'maccabi': 'Maccabi Tel Aviv',
    'partizan': 'Partizan',
    'partizan mozzart bet belgrade': 'Partizan',
    'partizan belgrade': 'Partizan',
    'crvena zvezda': 'Crvena Zvezda',
    'red star': 'Crvena Zvezda',
    'red star belgrade': 'Crvena Zvezda',
    'olympia milano': 'Olimpia Milano',
}

# EuroCup shares most clubs with the Euroleague
EUROCUP_ALIASES = {
    **EUROLEAGUE_ALIASES,
    'valencia basket': 'Valencia Basket',
    'valencia': 'Valencia Basket',
    'joventut badalona': 'Joventut Badalona',
    'joventut': 'Joventut Badalona',
    'cedevita olimpija': 'Cedevita Olimpija',
    'trento': 'Trento',
    'dolomiti energia trento': 'Trento',
    'paris basketball': 'Paris Basketball',
    'paris': 'Paris Basketball',
    'bourg': 'Bourg-en-Bresse',
    'jl bourg': 'Bourg-en-Bresse',
    'gran canaria': 'Gran Canaria',
    'hapoel jerusalem': 'Hapoel Jerusalem',
    'jerusalem': 'Hapoel Jerusalem',
    'besiktas': 'Besiktas',
    'london lions': 'London Lions',
    'lions': 'London Lions',
}

# Spain, Liga ACB
ACB_SPAIN_ALIASES = {
    'real madrid': 'Real Madrid',
    'real madrid baloncesto': 'Real Madrid',
    'barcelona': 'Barcelona',
    'fc barcelona': 'Barcelona',
    'baskonia': 'Baskonia',
    'saski baskonia': 'Baskonia',
    'td systems baskonia': 'Baskonia',
    'gran canaria': 'Gran Canaria',
    'dreamland gran canaria': 'Gran Canaria',
    'unicaja': 'Unicaja',
    'unicaja malaga': 'Unicaja',
    'valencia basket': 'Valencia Basket',
    'valencia': 'Valencia Basket',
    'joventut badalona': 'Joventut Badalona',
    'joventut': 'Joventut Badalona',
    'la penya': 'Joventut Badalona',
    'manresa': 'BAXI Manresa',
    'baxi manresa': 'BAXI Manresa',
    'tenerife': 'Tenerife',
    'lenovo tenerife': 'Tenerife',
    'obradoiro': 'Obradoiro',
    'monbus obradoiro': 'Obradoiro',
    'bilbao basket': 'Bilbao Basket',
    'bilbao': 'Bilbao Basket',
    'zaragoza': 'Zaragoza',
    'casademont zaragoza': 'Zaragoza',
    'murcia': 'UCAM Murcia',
    'ucam murcia': 'UCAM Murcia',
    'breogan': 'Breogan',
    'rio breogan': 'Breogan',
    'girona': 'Girona',
    'basquet girona': 'Girona',
}

# Italy, Lega Basket Serie A
ITALY_LEGA_ALIASES = {
    'olimpia milano': 'Olimpia Milano',
    'ea7 emporio armani milano': 'Olimpia Milano',
    'armani milano': 'Olimpia Milano',
    'ax armani exchange milano': 'Olimpia Milano',
    'milano': 'Olimpia Milano',
    'virtus bologna': 'Virtus Bologna',
    'virtus segafredo bologna': 'Virtus Bologna',
    'bologna': 'Virtus Bologna',
    'trento': 'Trento',
    'dolomiti energia trento': 'Trento',
    'brescia': 'Brescia',
    'germani brescia': 'Brescia',
    'venezia': 'Venezia',
    'reyer venezia': 'Venezia',
    'umana reyer venezia': 'Venezia',
    'varese': 'Varese',
    'openjobmetis varese': 'Varese',
    'sassari': 'Sassari',
    'dinamo sassari': 'Sassari',
    'banco di sardegna sassari': 'Sassari',
    'tortona': 'Tortona',
    'bertram tortona': 'Tortona',
    'napoli': 'Napoli Basket',
    'napoli basket': 'Napoli Basket',
    'reggio emilia': 'Reggio Emilia',
    'unahotels reggio emilia': 'Reggio Emilia',
    'pesaro': 'Pesaro',
    'vuelle pesaro': 'Pesaro',
    'carpegna prosciutto pesaro': 'Pesaro',
    'treviso': 'Treviso',
    'nutribullet treviso': 'Treviso',
    'trieste': 'Trieste',
    'allianz trieste': 'Trieste',
    'scafati': 'Scafati',
    'givova scafati': 'Scafati',
    'pistoia': 'Pistoia',
    'estra pistoia': 'Pistoia',
    'cremona': 'Cremona',
    'vanoli cremona': 'Cremona',
}

# Germany, BBL
GERMANY_BBL_ALIASES = {
    'bayern munich': 'Bayern Munich',
    'fc bayern munich': 'Bayern Munich',
    'fc bayern munchen': 'Bayern Munich',
    'fc bayern munich basketball': 'Bayern Munich',
    'alba berlin': 'ALBA Berlin',
    'alba': 'ALBA Berlin',
    'berlin': 'ALBA Berlin',
    'bamberg': 'Bamberg',
    'brose bamberg': 'Bamberg',
    'frankfurt': 'Frankfurt',
    'fraport skyliners': 'Frankfurt',
    'skyliners frankfurt': 'Frankfurt',
    'ulm': 'Ulm',
    'ratiopharm ulm': 'Ulm',
    'bonn': 'Bonn',
    'telekom baskets bonn': 'Bonn',
    'baskets bonn': 'Bonn',
    'ludwigsburg': 'Ludwigsburg',
    'mhp riesen ludwigsburg': 'Ludwigsburg',
    'oldenburg': 'Oldenburg',
    'ewe baskets oldenburg': 'Oldenburg',
    'baskets oldenburg': 'Oldenburg',
    'gottingen': 'Gottingen',
    'bk gottingen': 'Gottingen',
    'brose': 'Bamberg',
    'hamburg': 'Hamburg',
    'hamburg towers': 'Hamburg',
    'towers': 'Hamburg',
    'chemnitz': 'Chemnitz',
    'niners chemnitz': 'Chemnitz',
    'wurzburg': 'Wurzburg',
    's.oliver wurzburg': 'Wurzburg',
    'braunschweig': 'Braunschweig',
    'lowen braunschweig': 'Braunschweig',
    'vechta': 'Vechta',
    'rasta vechta': 'Vechta',
    'giessen': 'Giessen',
    'giessen 46ers': 'Giessen',
    'heidelberg': 'Heidelberg',
    'mlp academics heidelberg': 'Heidelberg',
    'rostock': 'Rostock',
    'rostock seawolves': 'Rostock',
}

# France, LNB Pro A
FRANCE_PRO_A_ALIASES = {
    'asvel': 'ASVEL',
    'ldlc asvel': 'ASVEL',
    'asvel villeurbanne': 'ASVEL',
    'lyon-villeurbanne': 'ASVEL',
    'villeurbanne': 'ASVEL',
    'paris basketball': 'Paris Basketball',
    'paris': 'Paris Basketball',
    'monaco': 'Monaco',
    'as monaco': 'Monaco',
    'strasbourg': 'Strasbourg',
    'sig strasbourg': 'Strasbourg',
    'le mans': 'Le Mans',
    'le mans sarthe': 'Le Mans',
    'msb': 'Le Mans',
    'limoges': 'Limoges',
    'limoges csp': 'Limoges',
    'csp limoges': 'Limoges',
    'dijon': 'Dijon',
    'jda dijon': 'Dijon',
    'boulogne-levallois': 'Boulogne-Levallois',
    'metropolitans 92': 'Boulogne-Levallois',
    'levallois': 'Boulogne-Levallois',
    'bourg': 'Bourg-en-Bresse',
    'jl bourg': 'Bourg-en-Bresse',
    'bourg-en-bresse': 'Bourg-en-Bresse',
    'cholet': 'Cholet',
    'cholet basket': 'Cholet',
    'pau-lacq-orthez': 'Pau-Lacq-Orthez',
    'elan bearnais': 'Pau-Lacq-Orthez',
    'pau': 'Pau-Lacq-Orthez',
    'nancy': 'Nancy',
    'sluc nancy': 'Nancy',
    'roanne': 'Roanne',
    'roanne basket': 'Roanne',
    'gravelines': 'Gravelines-Dunkerque',
    'bcm gravelines': 'Gravelines-Dunkerque',
    'nanterre': 'Nanterre',
    'nanterre 92': 'Nanterre',
    'orleans': 'Orleans',
    'orleans loiret': 'Orleans',
    'antibes': 'Antibes',
    'olympique antibes': 'Antibes',
    'chalon': 'Chalon-sur-Saone',
    'elan chalon': 'Chalon-sur-Saone',
}

# Turkey, BSL
TURKEY_BSL_ALIASES = {
    'fenerbahce': 'Fenerbahce',
    'fenerbahce beko': 'Fenerbahce',
    'fenerbahce beko istanbul': 'Fenerbahce',
    'anadolu efes': 'Anadolu Efes',
    'anadolu efes istanbul': 'Anadolu Efes',
    'efes': 'Anadolu Efes',
    'galatasaray': 'Galatasaray',
    'galatasaray nef': 'Galatasaray',
    'besiktas': 'Besiktas',
    'besiktas icrypex': 'Besiktas',
    'turk telekom': 'Turk Telekom',
    'turk telekom ankara': 'Turk Telekom',
    'ankara': 'Turk Telekom',
    'darussafaka': 'Darussafaka',
    'bahcesehir': 'Bahcesehir',
    'bahcesehir college': 'Bahcesehir',
    'bursaspor': 'Bursaspor',
    'frutti extra bursaspor': 'Bursaspor',
    'konyaspor': 'Konyaspor',
    'ittifak holding konyaspor': 'Konyaspor',
    'pinar karsiyaka': 'Pinar Karsiyaka',
    'karsiyaka': 'Pinar Karsiyaka',
    'tofas': 'Tofas',
    'tofas bursa': 'Tofas',
    'manisa': 'Manisa',
    'yukatel merkezefendi': 'Yukatel Merkezefendi',
    'merkezefendi': 'Yukatel Merkezefendi',
    'afyon belediye': 'Afyon Belediye',
    'afyon': 'Afyon Belediye',
    'aliaga petkim': 'Aliaga Petkim',
    'petkimspor': 'Aliaga Petkim',
}

# VTB United League
RUSSIA_VTB_ALIASES = {
    'cska moscow': 'CSKA Moscow',
    'cska': 'CSKA Moscow',
    'lokomotiv kuban': 'Lokomotiv Kuban',
    'lokomotiv': 'Lokomotiv Kuban',
    'unics kazan': 'UNICS Kazan',
    'unics': 'UNICS Kazan',
    'kazan': 'UNICS Kazan',
    'zenit': 'Zenit Saint Petersburg',
    'zenit st petersburg': 'Zenit Saint Petersburg',
    'zenit saint petersburg': 'Zenit Saint Petersburg',
    'khimki': 'Khimki',
    'khimki moscow': 'Khimki',
    'nizhny novgorod': 'Nizhny Novgorod',
    'parma': 'Parma',
    'parma perm': 'Parma',
    'astana': 'Astana',
    'bc astana': 'Astana',
    'minsk': 'Tsmoki-Minsk',
    'tsmoki-minsk': 'Tsmoki-Minsk',
    'tsmoki': 'Tsmoki-Minsk',
    'kalev': 'Kalev',
    'kalev/cramo': 'Kalev',
    'kalev cramo': 'Kalev',
    'enisey': 'Enisey',
    'enisey krasnoyarsk': 'Enisey',
    'krasnoyarsk': 'Enisey',
    'avtodor': 'Avtodor',
    'avtodor saratov': 'Avtodor',
    'saratov': 'Avtodor',
    'mb': 'MBA Moscow',
    'mba': 'MBA Moscow',
    'mba moscow': 'MBA Moscow',
    'samara': 'Samara',
    'bc samara': 'Samara',
    'novosibirsk': 'Novosibirsk',
}

# NHL
NHL_ALIASES = {
    'anaheim ducks': 'Anaheim Ducks',
    'arizona coyotes': 'Arizona Coyotes',
    'boston bruins': 'Boston Bruins',
    'buffalo sabres': 'Buffalo Sabres',
    'calgary flames': 'Calgary Flames',
    'carolina hurricanes': 'Carolina Hurricanes',
    'chicago blackhawks': 'Chicago Blackhawks',
    'colorado avalanche': 'Colorado Avalanche',
    'columbus blue jackets': 'Columbus Blue Jackets',
    'dallas stars': 'Dallas Stars',
    'detroit red wings': 'Detroit Red Wings',
    'edmonton oilers': 'Edmonton Oilers',
    'florida panthers': 'Florida Panthers',
    'los angeles kings': 'Los Angeles Kings',
    'la kings': 'Los Angeles Kings',
    'minnesota wild': 'Minnesota Wild',
    'montreal canadiens': 'Montreal Canadiens',
    'nashville predators': 'Nashville Predators',
    'new jersey devils': 'New Jersey Devils',
    'new york islanders': 'New York Islanders',
    'ny islanders': 'New York Islanders',
    'new york rangers': 'New York Rangers',
    'ny rangers': 'New York Rangers',
    'ottawa senators': 'Ottawa Senators',
    'philadelphia flyers': 'Philadelphia Flyers',
    'pittsburgh penguins': 'Pittsburgh Penguins',
    'san jose sharks': 'San Jose Sharks',
    'seattle kraken': 'Seattle Kraken',
    'st. louis blues': 'St. Louis Blues',
    'st louis blues': 'St. Louis Blues',
    'tampa bay lightning': 'Tampa Bay Lightning',
    'toronto maple leafs': 'Toronto Maple Leafs',
    'utah hockey club': 'Utah Hockey Club',
    'vancouver canucks': 'Vancouver Canucks',
    'vegas golden knights': 'Vegas Golden Knights',
    'washington capitals': 'Washington Capitals',
    'winnipeg jets': 'Winnipeg Jets',
    'ducks': 'Anaheim Ducks',
    'coyotes': 'Arizona Coyotes',
    'bruins': 'Boston Bruins',
    'sabres': 'Buffalo Sabres',
    'flames': 'Calgary Flames',
    'hurricanes': 'Carolina Hurricanes',
    'canes': 'Carolina Hurricanes',
    'blackhawks': 'Chicago Blackhawks',
    'hawks': 'Chicago Blackhawks',
    'avalanche': 'Colorado Avalanche',
    'avs': 'Colorado Avalanche',
    'blue jackets': 'Columbus Blue Jackets',
    'jackets': 'Columbus Blue Jackets',
    'stars': 'Dallas Stars',
    'red wings': 'Detroit Red Wings',
    'wings': 'Detroit Red Wings',
    'oilers': 'Edmonton Oilers',
    'panthers': 'Florida Panthers',
    'kings': 'Los Angeles Kings',
    'wild': 'Minnesota Wild',
    'canadiens': 'Montreal Canadiens',
    'habs': 'Montreal Canadiens',
    'predators': 'Nashville Predators',
    'preds': 'Nashville Predators',
    'devils': 'New Jersey Devils',
    'islanders': 'New York Islanders',
    'rangers': 'New York Rangers',
    'senators': 'Ottawa Senators',
    'sens': 'Ottawa Senators',
    'flyers': 'Philadelphia Flyers',
    'penguins': 'Pittsburgh Penguins',
    'pens': 'Pittsburgh Penguins',
    'sharks': 'San Jose Sharks',
    'kraken': 'Seattle Kraken',
    'blues': 'St. Louis Blues',
    'lightning': 'Tampa Bay Lightning',
    'bolts': 'Tampa Bay Lightning',
    'maple leafs': 'Toronto Maple Leafs',
    'leafs': 'Toronto Maple Leafs',
    'canucks': 'Vancouver Canucks',
    'golden knights': 'Vegas Golden Knights',
    'knights': 'Vegas Golden Knights',
    'capitals': 'Washington Capitals',
    'caps': 'Washington Capitals',
    'jets': 'Winnipeg Jets',
}

# NFL
NFL_ALIASES = {
    'arizona cardinals': 'Arizona Cardinals',
    'atlanta falcons': 'Atlanta Falcons',
    'baltimore ravens': 'Baltimore Ravens',
    'buffalo bills': 'Buffalo Bills',
    'carolina panthers': 'Carolina Panthers',
    'chicago bears': 'Chicago Bears',
    'cincinnati bengals': 'Cincinnati Bengals',
    'cleveland browns': 'Cleveland Browns',
    'dallas cowboys': 'Dallas Cowboys',
    'denver broncos': 'Denver Broncos',
    'detroit lions': 'Detroit Lions',
    'green bay packers': 'Green Bay Packers',
    'houston texans': 'Houston Texans',
    'indianapolis colts': 'Indianapolis Colts',
    'jacksonville jaguars': 'Jacksonville Jaguars',
    'kansas city chiefs': 'Kansas City Chiefs',
    'las vegas raiders': 'Las Vegas Raiders',
    'los angeles chargers': 'Los Angeles Chargers',
    'la chargers': 'Los Angeles Chargers',
    'los angeles rams': 'Los Angeles Rams',
    'la rams': 'Los Angeles Rams',
    'miami dolphins': 'Miami Dolphins',
    'minnesota vikings': 'Minnesota Vikings',
    'new england patriots': 'New England Patriots',
    'new orleans saints': 'New Orleans Saints',
    'new york giants': 'New York Giants',
    'ny giants': 'New York Giants',
    'new york jets': 'New York Jets',
    'ny jets': 'New York Jets',
    'philadelphia eagles': 'Philadelphia Eagles',
    'pittsburgh steelers': 'Pittsburgh Steelers',
    'san francisco 49ers': 'San Francisco 49ers',
    'seattle seahawks': 'Seattle Seahawks',
    'tampa bay buccaneers': 'Tampa Bay Buccaneers',
    'tennessee titans': 'Tennessee Titans',
    'washington commanders': 'Washington Commanders',
    'cardinals': 'Arizona Cardinals',
    'falcons': 'Atlanta Falcons',
    'ravens': 'Baltimore Ravens',
    'bills': 'Buffalo Bills',
    'panthers': 'Carolina Panthers',
    'bears': 'Chicago Bears',
    'bengals': 'Cincinnati Bengals',
    'browns': 'Cleveland Browns',
    'cowboys': 'Dallas Cowboys',
    'broncos': 'Denver Broncos',
    'lions': 'Detroit Lions',
    'packers': 'Green Bay Packers',
    'texans': 'Houston Texans',
    'colts': 'Indianapolis Colts',
    'jaguars': 'Jacksonville Jaguars',
    'jags': 'Jacksonville Jaguars',
    'chiefs': 'Kansas City Chiefs',
    'raiders': 'Las Vegas Raiders',
    'chargers': 'Los Angeles Chargers',
    'rams': 'Los Angeles Rams',
    'dolphins': 'Miami Dolphins',
    'vikings': 'Minnesota Vikings',
    'patriots': 'New England Patriots',
    'pats': 'New England Patriots',
    'saints': 'New Orleans Saints',
    'giants': 'New York Giants',
    'jets': 'New York Jets',
    'eagles': 'Philadelphia Eagles',
    'steelers': 'Pittsburgh Steelers',
    '49ers': 'San Francisco 49ers',
    'niners': 'San Francisco 49ers',
    'seahawks': 'Seattle Seahawks',
    'buccaneers': 'Tampa Bay Buccaneers',
    'bucs': 'Tampa Bay Buccaneers',
    'titans': 'Tennessee Titans',
    'commanders': 'Washington Commanders',
    'commies': 'Washington Commanders',
}

# Soccer: Premier League, La Liga, Serie A, Bundesliga and Ligue 1
SOCCER_ALIASES = {
    'arsenal': 'Arsenal',
    'arsenal fc': 'Arsenal',
    'aston villa': 'Aston Villa',
    'afc bournemouth': 'Bournemouth',
    'bournemouth': 'Bournemouth',
    'brentford': 'Brentford',
    'brentford fc': 'Brentford',
    'brighton': 'Brighton',
    'brighton and hove albion': 'Brighton',
    'brighton & hove albion': 'Brighton',
    'chelsea': 'Chelsea',
    'chelsea fc': 'Chelsea',
    'crystal palace': 'Crystal Palace',
    'everton': 'Everton',
    'everton fc': 'Everton',
    'fulham': 'Fulham',
    'fulham fc': 'Fulham',
    'ipswich': 'Ipswich',
    'ipswich town': 'Ipswich',
    'leicester': 'Leicester',
    'leicester city': 'Leicester',
    'liverpool': 'Liverpool',
    'liverpool fc': 'Liverpool',
    'man city': 'Manchester City',
    'manchester city': 'Manchester City',
    'man utd': 'Manchester United',
    'man united': 'Manchester United',
    'manchester united': 'Manchester United',
    'manchester utd': 'Manchester United',
    'newcastle': 'Newcastle',
    'newcastle united': 'Newcastle',
    'nottingham forest': 'Nottingham Forest',
    "nott'm forest": 'Nottingham Forest',
    'southampton': 'Southampton',
    'southampton fc': 'Southampton',
    'tottenham': 'Tottenham',
    'tottenham hotspur': 'Tottenham',
    'spurs': 'Tottenham',
    'west ham': 'West Ham',
    'west ham united': 'West Ham',
    'wolves': 'Wolves',
    'wolverhampton': 'Wolves',
    'wolverhampton wanderers': 'Wolves',
    'athletic bilbao': 'Athletic Club',
    'athletic club': 'Athletic Club',
    'atletico madrid': 'Atletico Madrid',
    'atlético madrid': 'Atletico Madrid',
    'barcelona': 'Barcelona',
    'fc barcelona': 'Barcelona',
    'real betis': 'Real Betis',
    'betis': 'Real Betis',
    'celta vigo': 'Celta Vigo',
    'getafe': 'Getafe',
    'getafe cf': 'Getafe',
    'girona': 'Girona',
    'girona fc': 'Girona',
    'las palmas': 'Las Palmas',
    'ud las palmas': 'Las Palmas',
    'leganes': 'Leganes',
    'cd leganes': 'Leganes',
    'mallorca': 'Mallorca',
    'rcd mallorca': 'Mallorca',
    'osasuna': 'Osasuna',
    'ca osasuna': 'Osasuna',
    'rayo vallecano': 'Rayo Vallecano',
    'real madrid': 'Real Madrid',
    'real sociedad': 'Real Sociedad',
    'sevilla': 'Sevilla',
    'sevilla fc': 'Sevilla',
    'valencia': 'Valencia',
    'valencia cf': 'Valencia',
    'valladolid': 'Valladolid',
    'real valladolid': 'Valladolid',
    'villarreal': 'Villarreal',
    'villarreal cf': 'Villarreal',
    'espanyol': 'Espanyol',
    'rcd espanyol': 'Espanyol',
    'alaves': 'Alaves',
    'deportivo alaves': 'Alaves',
    'ac milan': 'AC Milan',
    'milan': 'AC Milan',
    'atalanta': 'Atalanta',
    'bologna': 'Bologna',
    'bologna fc': 'Bologna',
    'cagliari': 'Cagliari',
    'como': 'Como',
    'como 1907': 'Como',
    'empoli': 'Empoli',
    'fiorentina': 'Fiorentina',
    'acf fiorentina': 'Fiorentina',
    'genoa': 'Genoa',
    'genoa cfc': 'Genoa',
    'hellas verona': 'Hellas Verona',
    'verona': 'Hellas Verona',
    'inter': 'Inter Milan',
    'inter milan': 'Inter Milan',
    'internazionale': 'Inter Milan',
    'juventus': 'Juventus',
    'juve': 'Juventus',
    'lazio': 'Lazio',
    'ss lazio': 'Lazio',
    'lecce': 'Lecce',
    'us lecce': 'Lecce',
    'monza': 'Monza',
    'ac monza': 'Monza',
    'napoli': 'Napoli',
    'ssc napoli': 'Napoli',
    'parma': 'Parma',
    'parma calcio': 'Parma',
    'roma': 'AS Roma',
    'as roma': 'AS Roma',
    'torino': 'Torino',
    'torino fc': 'Torino',
    'udinese': 'Udinese',
    'venezia': 'Venezia',
    'venezia fc': 'Venezia',
    'bayern': 'Bayern Munich',
    'bayern munich': 'Bayern Munich',
    'fc bayern munich': 'Bayern Munich',
    'bayern munchen': 'Bayern Munich',
    'bayer leverkusen': 'Bayer Leverkusen',
    'leverkusen': 'Bayer Leverkusen',
    'borussia dortmund': 'Borussia Dortmund',
    'dortmund': 'Borussia Dortmund',
    'bvb': 'Borussia Dortmund',
    'rb leipzig': 'RB Leipzig',
    'leipzig': 'RB Leipzig',
    'eintracht frankfurt': 'Eintracht Frankfurt',
    'frankfurt': 'Eintracht Frankfurt',
    'vfb stuttgart': 'VfB Stuttgart',
    'stuttgart': 'VfB Stuttgart',
    'werder bremen': 'Werder Bremen',
    'bremen': 'Werder Bremen',
    'hoffenheim': 'Hoffenheim',
    'tsg hoffenheim': 'Hoffenheim',
    'union berlin': 'Union Berlin',
    'fc union berlin': 'Union Berlin',
    'sc freiburg': 'SC Freiburg',
    'freiburg': 'SC Freiburg',
    'borussia monchengladbach': 'Borussia Monchengladbach',
    'gladbach': 'Borussia Monchengladbach',
    'monchengladbach': 'Borussia Monchengladbach',
    'wolfsburg': 'Wolfsburg',
    'vfl wolfsburg': 'Wolfsburg',
    'mainz': 'Mainz 05',
    'mainz 05': 'Mainz 05',
    'augsburg': 'Augsburg',
    'fc augsburg': 'Augsburg',
    'heidenheim': 'Heidenheim',
    'fc heidenheim': 'Heidenheim',
    'bochum': 'Bochum',
    'vfl bochum': 'Bochum',
    'st pauli': 'St. Pauli',
    'fc st pauli': 'St. Pauli',
    'holstein kiel': 'Holstein Kiel',
    'kiel': 'Holstein Kiel',
    'paris saint-germain': 'Paris Saint Germain',
    'paris saint germain': 'Paris Saint Germain',
    'psg': 'Paris Saint Germain',
    'marseille': 'Marseille',
    'olympique marseille': 'Marseille',
    'om': 'Marseille',
    'lyon': 'Lyon',
    'olympique lyon': 'Lyon',
    'olympique lyonnais': 'Lyon',
    'monaco': 'Monaco',
    'as monaco': 'Monaco',
    'lille': 'Lille',
    'losc lille': 'Lille',
    'nice': 'Nice',
    'ogc nice': 'Nice',
    'lens': 'Lens',
    'rc lens': 'Lens',
    'rennes': 'Rennes',
    'stade rennais': 'Rennes',
    'brest': 'Brest',
    'stade brestois': 'Brest',
    'reims': 'Reims',
    'stade de reims': 'Reims',
    'toulouse': 'Toulouse',
    'toulouse fc': 'Toulouse',
    'strasbourg': 'Strasbourg',
    'rc strasbourg': 'Strasbourg',
    'montpellier': 'Montpellier',
    'montpellier hsc': 'Montpellier',
    'nantes': 'Nantes',
    'fc nantes': 'Nantes',
    'auxerre': 'Auxerre',
    'aj auxerre': 'Auxerre',
    'angers': 'Angers',
    'angers sco': 'Angers',
    'le havre': 'Le Havre',
    'le havre ac': 'Le Havre',
    'saint-etienne': 'Saint-Etienne',
    'saint etienne': 'Saint-Etienne',
    'as saint-etienne': 'Saint-Etienne',
}


# Resolver key -> alias table
ALIAS_TABLES: Dict[str, Dict[str, str]] = {
    'soccer': SOCCER_ALIASES,
    'basketball': NBA_ALIASES,
    'basketball_euroleague': EUROLEAGUE_ALIASES,
    'basketball_eurocup': EUROCUP_ALIASES,
    'basketball_acb_spain': ACB_SPAIN_ALIASES,
    'basketball_italy_lega': ITALY_LEGA_ALIASES,
    'basketball_germany_bbl': GERMANY_BBL_ALIASES,
    'basketball_france_pro_a': FRANCE_PRO_A_ALIASES,
    'basketball_turkey_bsl': TURKEY_BSL_ALIASES,
    'basketball_russia_vtb': RUSSIA_VTB_ALIASES,
    'hockey': NHL_ALIASES,
    'american_football': NFL_ALIASES,
}


def get_aliases(key: str) -> Dict[str, str]:
    """Alias table for a resolver key (empty for unknown keys)."""
    return ALIAS_TABLES.get(key, {})


def canonical_names(key: str) -> List[str]:
    """Unique canonical names of a resolver key, in table order."""
    return list(dict.fromkeys(get_aliases(key).values()))
