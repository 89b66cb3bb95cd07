"""Language phrase tables consulted by the builder and the exporter.

Everything here is plain data keyed by language.  Both languages expose the
same keys so the assembly code never branches on language; it only looks up
``PHRASES[language][key]``.

Template placeholders used by the archetype and paragraph templates:

    {title} {setting} {logline} {genre} {tone} {tone_article}
    {lead} {lead_intro} {names} {time}
"""

from __future__ import annotations


GENRES = ("Drama", "Comedy", "Thriller", "Romance", "Sci-Fi", "Mystery", "Slice of Life")
TONES = ("Hopeful", "Gritty", "Playful", "Melancholic", "Inspirational")
LANGUAGES = ("english", "hindi")
LENGTH_ACTS = {"short": 3, "medium": 4, "long": 5}

# Dramatic rotation; first is always the opening act, last the closing act.
ARCHETYPES = ("setup", "rising", "midpoint", "climax", "resolution")


_ENGLISH = {
    "headings": {
        "logline":   "Logline",
        "summary":   "Summary",
        "structure": "Structure",
        "scenes":    "Scenes",
        "closing":   "Final Note",
    },
    "act_labels": ("Act One", "Act Two", "Act Three", "Act Four", "Act Five"),
    "scene_heading": "SCENE {number} · {location} - {time}",
    "times": ("Morning", "Afternoon", "Dusk", "Night", "Dawn"),
    "conjunction": " and ",
    "placeholder_speaker": "Narrator",
    "fallbacks": {
        "title":   "Untitled Script",
        "setting": "an unnamed city",
        "logline": "Every choice pulls them closer to the truth they have been avoiding.",
        "lead":    "the protagonist",
        "names":   "an ensemble still finding its voice",
    },
    "genres": {
        "Drama":         "drama",
        "Comedy":        "comedy",
        "Thriller":      "thriller",
        "Romance":       "romance",
        "Sci-Fi":        "sci-fi",
        "Mystery":       "mystery",
        "Slice of Life": "slice-of-life",
    },
    "tones": {
        "Hopeful":       "hopeful",
        "Gritty":        "gritty",
        "Playful":       "playful",
        "Melancholic":   "melancholic",
        "Inspirational": "inspirational",
    },
    "tone_articles": {
        "Hopeful":       "a hopeful",
        "Gritty":        "a gritty",
        "Playful":       "a playful",
        "Melancholic":   "a melancholic",
        "Inspirational": "an inspirational",
    },
    "summary": (
        "{title} is {tone_article} {genre} set in {setting}, following {names}. {logline}"
    ),
    "closing": (
        "{title} closes its {genre} arc on {tone_article} note, leaving the audience "
        "with a story worth sharing long after the final frame."
    ),
    "archetypes": {
        "setup": {
            "focus":   "Setup: we meet {lead} in {setting} and learn what they want most.",
            "stakes":  "If nothing changes, the {tone} promise of this {genre} fades before it begins.",
            "scene":   "We find {lead} in an everyday rhythm, just as the first crack in that routine appears.",
            "opening": "{time} at {setting}, where {lead_intro} moves through a familiar routine.",
            "button":  "Something small catches the eye of {lead}, a detail that will change everything.",
        },
        "rising": {
            "focus":   "Rising action: complications stack up once {lead} commits to the plan.",
            "stakes":  "Every shortcut costs trust, and the pressure of this {genre} keeps climbing.",
            "scene":   "The plan meets its first real obstacle and every ally is tested.",
            "opening": "{time} at {setting}, and the pace picks up while {lead_intro} juggles more than anyone can see.",
            "button":  "A phone buzzes with news that complicates everything.",
        },
        "midpoint": {
            "focus":   "Midpoint turn: a revelation flips everything {lead} thought they knew.",
            "stakes":  "The goal is still within reach, but the price of chasing it has doubled.",
            "scene":   "An unexpected truth surfaces and the story changes direction.",
            "opening": "{time} settles over {setting} as {lead_intro} holds the one piece of evidence nobody expected.",
            "button":  "Silence falls over the room.",
        },
        "climax": {
            "focus":   "Climax: everything is on the line as {lead} faces the decisive moment.",
            "stakes":  "Win or lose, there is no way back for {lead} to who they were at the start.",
            "scene":   "Every thread of the story pulls tight into a single moment.",
            "opening": "{time} at {setting}, the air electric, and {lead_intro} has one last shot.",
            "button":  "One decision, and nothing will be the same.",
        },
        "resolution": {
            "focus":   "Resolution: the dust settles and the change travels forward with {lead}.",
            "stakes":  "What remains is the {tone} echo of the choices made along the way.",
            "scene":   "Loose threads untangle and a new beginning comes into view.",
            "opening": "{time} at {setting}, quieter now, as {lead_intro} finally takes a long breath.",
            "button":  "The camera pulls back slowly.",
        },
    },
    "tone_lines": {
        "Hopeful": (
            "We can still make this work.",
            "I really think today is our day.",
            "There's a way through this, I can feel it.",
        ),
        "Gritty": (
            "Nobody is handing us anything.",
            "We do this the hard way or not at all.",
            "Keep your head down and keep moving.",
        ),
        "Playful": (
            "Okay, hear me out, this is genius.",
            "Worst case, we get a great story out of it.",
            "Race you to the finish?",
        ),
        "Melancholic": (
            "Funny how fast things slip away.",
            "I keep thinking about how it used to be.",
            "Maybe some things aren't meant to last.",
        ),
        "Inspirational": (
            "This is bigger than the two of us.",
            "If we don't try now, when will we?",
            "People are counting on us to show up.",
        ),
    },
    "genre_lines": {
        "Drama": (
            "What we decide here will follow us home.",
            "I need you to be honest with me.",
            "This matters more than you know.",
        ),
        "Comedy": (
            "Also, I may have promised the caterer a goat.",
            "Nobody panic, but the plan is on fire.",
            "In my defense, the instructions were unclear.",
        ),
        "Thriller": (
            "Someone has been watching us.",
            "We have less time than we think.",
            "Don't trust the first answer you get.",
        ),
        "Romance": (
            "I see your face in every crowd.",
            "Stay a little longer?",
            "You make the hard parts feel easy.",
        ),
        "Sci-Fi": (
            "The readings don't make any sense.",
            "If the signal is real, nothing will be the same.",
            "Run the simulation one more time.",
        ),
        "Mystery": (
            "The clue was in front of us all along.",
            "Someone here is lying.",
            "Why would anyone hide that?",
        ),
        "Slice of Life": (
            "Let's grab chai before we start.",
            "The neighbours are going to talk about this.",
            "Small wins still count.",
        ),
    },
}


_HINDI = {
    "headings": {
        "logline":   "लॉगलाइन",
        "summary":   "सार",
        "structure": "संरचना",
        "scenes":    "दृश्य",
        "closing":   "अंतिम नोट",
    },
    "act_labels": ("अंक एक", "अंक दो", "अंक तीन", "अंक चार", "अंक पांच"),
    "scene_heading": "दृश्य {number} · {location} - {time}",
    "times": ("सुबह", "दोपहर", "शाम", "रात", "भोर"),
    "conjunction": " और ",
    "placeholder_speaker": "सूत्रधार",
    "fallbacks": {
        "title":   "बेनाम स्क्रिप्ट",
        "setting": "एक अनाम शहर",
        "logline": "हर फ़ैसला उन्हें उस सच के करीब ले जाता है जिससे वे अब तक बचते आए हैं।",
        "lead":    "मुख्य किरदार",
        "names":   "कुछ अनजाने किरदार",
    },
    "genres": {
        "Drama":         "ड्रामा",
        "Comedy":        "कॉमेडी",
        "Thriller":      "थ्रिलर",
        "Romance":       "रोमांस",
        "Sci-Fi":        "साइंस-फ़िक्शन",
        "Mystery":       "रहस्य",
        "Slice of Life": "स्लाइस-ऑफ़-लाइफ़",
    },
    "tones": {
        "Hopeful":       "आशावादी",
        "Gritty":        "कठोर",
        "Playful":       "चंचल",
        "Melancholic":   "उदास",
        "Inspirational": "प्रेरणादायक",
    },
    "tone_articles": {
        "Hopeful":       "एक आशावादी",
        "Gritty":        "एक कठोर",
        "Playful":       "एक चंचल",
        "Melancholic":   "एक उदास",
        "Inspirational": "एक प्रेरणादायक",
    },
    "summary": (
        "{title}, {setting} में रची-बसी {tone_article} {genre} कहानी है, "
        "जिसके केंद्र में {names} हैं। {logline}"
    ),
    "closing": (
        "{title} अपनी {genre} यात्रा को {tone_article} मोड़ पर समेटती है और दर्शकों के लिए "
        "एक ऐसी कहानी छोड़ जाती है जो आखिरी फ्रेम के बाद भी याद रहे।"
    ),
    "archetypes": {
        "setup": {
            "focus":   "शुरुआत: {setting} में हम {lead} से मिलते हैं और जानते हैं कि उसकी सबसे बड़ी चाह क्या है।",
            "stakes":  "अगर कुछ नहीं बदला, तो इस {tone} {genre} कहानी का वादा शुरू होने से पहले ही फीका पड़ जाएगा।",
            "scene":   "{lead} की रोज़मर्रा की दुनिया सामने आती है, और उसी दिनचर्या में पहली दरार दिखती है।",
            "opening": "{setting} पर {time} की रोशनी फैलती है और {lead_intro} की दिनचर्या शुरू होती है।",
            "button":  "{lead} की नज़र उस छोटी-सी बात पर पड़ती है जो सब कुछ बदल देगी।",
        },
        "rising": {
            "focus":   "बढ़ता संघर्ष: योजना पर अमल शुरू होते ही {lead} के सामने मुश्किलें बढ़ने लगती हैं।",
            "stakes":  "हर शॉर्टकट भरोसे की कीमत माँगता है, और {genre} का दबाव लगातार बढ़ता है।",
            "scene":   "योजना पहली असली रुकावट से टकराती है और हर साथी की परीक्षा होती है।",
            "opening": "{time} के वक़्त {setting} में हलचल तेज़ है, और {lead_intro} के चारों ओर दबाव बढ़ रहा है।",
            "button":  "एक फ़ोन कॉल सब कुछ और उलझा देती है।",
        },
        "midpoint": {
            "focus":   "मध्य मोड़: एक खुलासा {lead} की हर धारणा को पलट देता है।",
            "stakes":  "मंज़िल अब भी पहुँच में है, पर उसकी कीमत दोगुनी हो चुकी है।",
            "scene":   "एक अनपेक्षित सच सामने आता है और कहानी की दिशा बदल जाती है।",
            "opening": "{time} की खामोशी में {setting} अलग-सा लगता है, और {lead_intro} के हाथ में वह सबूत है जिसकी किसी को उम्मीद नहीं थी।",
            "button":  "कमरे में सन्नाटा छा जाता है।",
        },
        "climax": {
            "focus":   "चरम: सब कुछ दाँव पर है और {lead} के सामने निर्णायक पल है।",
            "stakes":  "जीत हो या हार, {lead} के लिए पुराने रास्ते पर लौटना अब मुमकिन नहीं।",
            "scene":   "कहानी की सारी डोरें एक ही पल में आ सिमटती हैं।",
            "opening": "{time} होते-होते {setting} में तनाव चरम पर है, और {lead_intro} के सामने आखिरी मौका है।",
            "button":  "एक फ़ैसला, और कुछ भी पहले जैसा नहीं रहता।",
        },
        "resolution": {
            "focus":   "समापन: धूल बैठती है और बदलाव {lead} के साथ आगे बढ़ता है।",
            "stakes":  "जो बचता है, वह रास्ते में लिए गए फ़ैसलों की {tone} गूँज है।",
            "scene":   "उलझे धागे सुलझते हैं और एक नई शुरुआत की झलक मिलती है।",
            "opening": "{time} की रोशनी में {setting} फिर से शांत है, और {lead_intro} के चेहरे पर एक नई चमक है।",
            "button":  "कैमरा धीरे-धीरे पीछे हटता है।",
        },
    },
    "tone_lines": {
        "Hopeful": (
            "हम अब भी इसे कर सकते हैं।",
            "मुझे लगता है आज हमारा दिन है।",
            "कोई न कोई रास्ता ज़रूर निकलेगा।",
        ),
        "Gritty": (
            "यहाँ कोई कुछ थाली में परोस कर नहीं देता।",
            "करना है तो पूरी मेहनत से, वरना नहीं।",
            "सिर झुकाओ और चलते रहो।",
        ),
        "Playful": (
            "सुनो, मेरे पास एक कमाल का आइडिया है।",
            "बुरे से बुरा क्या होगा, एक मज़ेदार किस्सा बन जाएगा।",
            "चलो, देखते हैं कौन पहले पहुँचता है।",
        ),
        "Melancholic": (
            "कितनी जल्दी सब कुछ हाथ से फिसल जाता है।",
            "मुझे पुराने दिन याद आते रहते हैं।",
            "शायद कुछ चीज़ें हमेशा के लिए नहीं होतीं।",
        ),
        "Inspirational": (
            "यह हम दोनों से कहीं बड़ा है।",
            "अगर अभी नहीं, तो कब?",
            "लोग हम पर भरोसा कर रहे हैं।",
        ),
    },
    "genre_lines": {
        "Drama": (
            "आज का फ़ैसला हमारे साथ घर तक जाएगा।",
            "मुझसे सच बोलो।",
            "यह जितना दिखता है, उससे कहीं ज़्यादा ज़रूरी है।",
        ),
        "Comedy": (
            "वैसे, मैंने हलवाई से एक बकरी का वादा कर दिया है।",
            "घबराना मत, पर प्लान में आग लग चुकी है।",
            "मेरी गलती नहीं, निर्देश ही उलझे हुए थे।",
        ),
        "Thriller": (
            "कोई हम पर नज़र रखे हुए है।",
            "हमारे पास सोच से भी कम वक़्त है।",
            "पहले जवाब पर भरोसा मत करना।",
        ),
        "Romance": (
            "हर भीड़ में बस तुम्हारा चेहरा दिखता है।",
            "थोड़ी देर और रुक जाओ?",
            "तुम्हारे साथ मुश्किलें भी आसान लगती हैं।",
        ),
        "Sci-Fi": (
            "इन रीडिंग्स का कोई मतलब नहीं बन रहा।",
            "अगर सिग्नल सच है, तो कुछ भी पहले जैसा नहीं रहेगा।",
            "सिमुलेशन एक बार और चलाओ।",
        ),
        "Mystery": (
            "सुराग शुरू से हमारे सामने था।",
            "यहाँ कोई झूठ बोल रहा है।",
            "कोई यह बात छिपाएगा क्यों?",
        ),
        "Slice of Life": (
            "शुरू करने से पहले एक चाय हो जाए।",
            "पड़ोसी इस पर ज़रूर बातें बनाएँगे।",
            "छोटी जीतें भी मायने रखती हैं।",
        ),
    },
}


PHRASES = {
    "english": _ENGLISH,
    "hindi":   _HINDI,
}
