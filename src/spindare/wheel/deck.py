"""Default party deck - 20 challenges per color."""

from functools import lru_cache

from spindare.wheel.challenges import ChallengePool, ChallengeTable
from spindare.wheel.sectors import ColorSector


DEFAULT_DECK: ChallengeTable = {
    ColorSector.RED: ("Pocałunek/Zbliżenie", [
        "Pocałuj osobę po lewej",
        "Pocałuj osobę po prawej",
        "Pocałuj osobę na wprost",
        "Zbliżenie z kimkolwiek w zasięgu ręki",
        "Pocałuj na policzek",
        "Pocałuj na czubek nosa",
        "Przyciągnij osobę do siebie i pocałuj",
        "Pocałuj w ramię",
        "Pocałuj w dłoń",
        "Pocałuj w czoło",
        "Pocałuj w policzek 2 osoby",
        "Pocałuj najbliższą osobę",
        "Pocałuj kogoś siedzącego obok",
        "Pocałuj w ucho (głupkowato)",
        "Pocałuj w rękę z gestem królewskim",
        "Pocałuj i zrób 'air kiss' w stronę kogoś",
        "Pocałuj osobę, która najbardziej krzyczy",
        "Pocałuj w nos 2 osoby po kolei",
        "Pocałuj osobę, która ma najśmieszniejszą minę",
        "Pocałuj osobę w losowy sposób",
    ]),
    ColorSector.BLUE: ("Przytulenie/Gest", [
        "Przytul osobę po lewej",
        "Przytul osobę po prawej",
        "Przytul 2 osoby jednocześnie",
        "Przytul najbliższą osobę i udawaj misia",
        "Przytul kogoś stojącego obok",
        "Przytul osobę z największym uśmiechem",
        "Przytul i obróć 360 stopni",
        "Przytul osobę i zrób 'high five'",
        "Przytul i zaśpiewaj 'la la la'",
        "Przytul w łokieć",
        "Przytul w ramię",
        "Przytul i potrząśnij delikatnie",
        "Przytul i udawaj drzewo",
        "Przytul osobę najgłośniej krzyczącą",
        "Przytul osobę w losowy sposób",
        "Przytul osobę, która stoi w środku",
        "Przytul kogoś i zrób mini taniec",
        "Przytul i powiedz komplement",
        "Przytul osobę, która się śmieje najgłośniej",
        "Przytul losową osobę",
    ]),
    ColorSector.GREEN: ("Komplement/Śmieszna akcja", [
        "Powiedz komuś komplement",
        "Powiedz coś absurdalnego o sobie",
        "Udawaj kogoś przez 10 sek",
        "Powiedz najgłupszy żart jaki znasz",
        "Udawaj zwierzę",
        "Powiedz sekret, który każdy powinien znać",
        "Udawaj upadek w zabawny sposób",
        "Powiedz coś w języku wymyślonym przez siebie",
        "Powiedz coś komplementującego wszystkich wokół",
        "Udawaj, że jesteś DJ-em",
        "Powiedz coś śmiesznego i energicznie",
        "Zrób minę strasznie głupią",
        "Powiedz kogo najbardziej lubisz w pokoju",
        "Udawaj, że pijesz niewidzialny shot",
        "Powiedz 'kocham imprezę!' z gestem",
        "Udawaj piosenkę i śpiewaj 5 sekund",
        "Powiedz coś, co każdy powinien powtórzyć",
        "Zrób głupią pozę",
        "Powiedz coś absurdalnego do losowej osoby",
        "Udawaj, że jesteś influencerem",
    ]),
    ColorSector.YELLOW: ("Taniec/Akcja absurdalna", [
        "Zrób mini taniec",
        "Zrób taniec w miejscu",
        "Zrób taniec na stole lub krześle",
        "Zrób 'air dance' przez 10 sek",
        "Obróć się 3 razy i zatańcz",
        "Zrób absurdalny taniec z rękami",
        "Zatańcz z losową osobą",
        "Udawaj robota i tańcz",
        "Zrób taniec misia",
        "Zrób taniec zombie",
        "Zrób taniec kangura",
        "Zrób taniec na jednej nodze",
        "Zrób taniec „podłoga w ogień”",
        "Zrób taniec w parach",
        "Zrób absurdalny taniec solo",
        "Tańcz z wyciągniętymi rękami",
        "Zrób taniec i krzycz 'woo!'",
        "Zrób taniec po kole",
        "Zrób taniec jak w teledysku",
        "Zrób taniec naśladujący losową osobę",
    ]),
}


@lru_cache
def default_pool() -> ChallengePool:
    """Get the shared default pool (80 cards)."""
    return ChallengePool.from_table(DEFAULT_DECK)
