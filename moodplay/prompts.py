TRENDING_CONTEXT = {
    "global": {
        "viral": "Sabrina Carpenter - Espresso, Chappell Roan - Good Luck Babe, Billie Eilish - Birds of a Feather, Shaboozey - A Bar Song, Benson Boone - Beautiful Things",
        "tiktok": "APT by Bruno Mars & ROSÉ, Die With A Smile by Lady Gaga & Bruno Mars, I Am Music by Alicia Keys, Austin by Dasha",
        "albums": "The Tortured Poets Department - Taylor Swift, Hit Me Hard and Soft - Billie Eilish, Short n Sweet - Sabrina Carpenter",
    },
    "regional": {
        "US": "Shaboozey, Zach Bryan, Morgan Wallen, Chappell Roan, Sabrina Carpenter, Post Malone",
        "GB": "Central Cee, Dave, ArrDee, Cat Burns, PinkPantheress, Fred again..",
        "KR": "aespa - Supernova, (G)I-DLE - Klaxon, SEVENTEEN - God of Music, NewJeans - Get Up",
        "JP": "YOASOBI - アイドル, Mrs.GREEN APPLE, King Gnu, Ado - 唱, Official髭男dism",
        "IN": "AP Dhillon, Divine, Diljit Dosanjh, Arijit Singh, Raftaar, Badshah",
        "BR": "Anitta, Luísa Sonza, Pabllo Vittar, Ludmilla, Kevinho, MC Ryan SP",
        "ES": "Bad Gyal, C.Tangana, Rosalía, Quevedo, Bizarrap, Rauw Alejandro",
    },
}


SONG_CANDIDATES_PROMPT = """
You are a music expert with knowledge of current trends as of [DATE].

**Trending context**
[TRENDING]

**Task**
The user wants: "[USER_PROMPT]"
Suggest 8 songs that match this request and that have an official video on YouTube.

**Requirements**
  1. Use trending artists from the context above when they fit the request.
  2. Every song must be by a different artist - NO REPEATS.
  3. Mix genres that suit the mood instead of staying inside a single one.
  4. Mix about 70% recent hits (last two years) with 30% classics that fit the vibe.
  5. Only suggest real, released songs with their exact title and main artist.

**Output**
Return only the following JSON array, no commentary before or after. Each element must follow this schema:
{
  "title": "<Song title>",
  "artist": "<Artist>"
}
"""


SEARCH_QUERIES_PROMPT = """
You are a music expert with knowledge of current trends as of [DATE].

**Trending context**
[TRENDING]

**Task**
The user wants: "[USER_PROMPT]"
Generate 10-12 YouTube search queries that will find diverse, current music matching their request.
Each query should be optimized for YouTube search to find official music videos.

**Requirements**
  1. Use trending artists from the context above when relevant.
  2. Mix 70% recent hits (last two years) with 30% classics that fit the vibe.
  3. Each query should be a different artist - NO REPEATS.
  4. Format: "Artist Name Song Title official music video" or "Artist Name Song Title".
  5. Consider the user's mood/genre but include the trending context.

**Output**
Return only a JSON array of search query strings, no commentary before or after:
["query1", "query2", "query3", ...]
"""
