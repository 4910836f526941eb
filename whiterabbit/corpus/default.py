DEFAULT_CORPUS = (
    "Once upon a time there was a rabbit who lived at the edge of a quiet forest.",
    "The rabbit was always late, and it carried a pocket watch wherever it went.",
    "Every morning the rabbit ran along the river to see the sun rise over the hills.",
    "A curious girl followed the rabbit down a deep hole and into a strange world.",
    "In the garden the flowers opened slowly as the morning light grew warm.",
    "During the storm the old trees bent low and the rain fell against the windows.",
    "She walked through the village and greeted every neighbour by name.",
    "He walked to the harbour to watch the fishing boats return with the tide.",
    "The cat sat on the warm stone wall and watched the birds in the orchard.",
    "The dog ran across the field and barked at the clouds drifting overhead.",
    "The weather is beautiful today, and the sky is clear and bright.",
    "The quick brown fox jumps over the lazy dog near the riverbank.",
    "Science and technology shape the way people live, work and communicate.",
    "Science begins with careful observation and a willingness to be wrong.",
    "Technology changes quickly, but the questions it raises are often very old.",
    "Researchers test each idea against evidence before they accept it as knowledge.",
    "A good experiment isolates one variable and measures the result with care.",
    "Computers follow instructions precisely, which is both their strength and their weakness.",
    "Networks connect millions of machines so that information can travel across the world.",
    "Engineers design bridges that balance strength, cost and beauty.",
    "Philosophy explores the nature of knowledge, reality and the good life.",
    "Philosophers ask whether the mind can ever truly know the world outside itself.",
    "The nature of time has puzzled thinkers for thousands of years.",
    "Ethics asks how we ought to live and what we owe to one another.",
    "Logic gives us rules for moving from what we know to what follows from it.",
    "Many questions in philosophy remain open, and that is part of their appeal.",
    "Art and culture throughout history reflect the hopes and fears of each generation.",
    "Painters in the old cities mixed their own colours from earth and stone.",
    "Music can carry a memory across many years and many miles.",
    "Stories travel from one culture to another and change a little with every telling.",
    "Museums preserve the work of artists so that future visitors can learn from it.",
    "The theatre was full, and the audience waited in silence for the curtain to rise.",
    "Poets often find great meaning in small and ordinary things.",
    "Architecture shows how a society thinks about space, light and community.",
    "History teaches that great change often begins with a single small decision.",
    "The ancient library held scrolls on medicine, mathematics and astronomy.",
    "Travellers crossed the desert by following the stars at night.",
    "Farmers watch the sky closely because the harvest depends on the rain.",
    "The ocean covers most of the planet and hides many mysteries in its depths.",
    "Mountains rise slowly over millions of years and wear away just as slowly.",
    "Birds migrate across entire continents guided by the sun and the earth itself.",
    "A healthy forest supports thousands of species, from fungi to owls.",
    "Rivers carve valleys, feed cities and carry stories down to the sea.",
    "The city woke early, and the streets filled with the sound of bicycles.",
    "Markets are busy in the morning when the bread is still warm.",
    "Children learn new words quickly when they hear them in a story.",
    "Teachers help students ask better questions rather than simply memorise answers.",
    "Reading every day builds patience, vocabulary and imagination.",
    "Friends gathered around the table to share food and tell stories.",
    "Cooking is a kind of chemistry that everyone can practise at home.",
    "A cup of tea can make a long afternoon feel calm and unhurried.",
    "Language models predict the next word from the words that came before.",
    "A simple model can still produce text that looks surprisingly natural.",
    "Good software is tested often and changed in small careful steps.",
    "The server answered every request quickly and returned a friendly message.",
    "Data flows through the system like water through a network of pipes.",
    "Mathematics describes patterns that appear everywhere in nature.",
    "The stars we see at night sent their light long before we were born.",
    "Astronomers use large telescopes to study galaxies far beyond our own.",
    "Why do we dream, and what do our dreams mean?",
    "What a wonderful surprise it was to find the garden in full bloom!",
    "Can a machine ever understand the meaning of a poem?",
    "Keep going, because every journey is made of small steps!",
    "At the end of the day the rabbit returned home and fell asleep by the fire.",
)
