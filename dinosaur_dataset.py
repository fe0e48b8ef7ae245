"""Bundled example dataset of dinosaur records, in the raw payload shape."""

DINOSAURS = [
    {
        "dinosaurId": "YLtkN9R37",
        "name": "Allosaurus",
        "pronunciation": "AL-oh-sore-us",
        "meaningOfName": "other lizard",
        "diet": "carnivorous",
        "lengthInMeters": 12,
        "period": "Late Jurassic",
        "mya": [155, 150],
        "info": "Allosaurus was a large bipedal predator with a skull lined with dozens of sharp, serrated teeth."
    },
    {
        "dinosaurId": "GGvO1X9Zeh",
        "name": "Apatosaurus",
        "pronunciation": "uh-PAT-uh-sore-us",
        "meaningOfName": "deceptive lizard",
        "diet": "herbivorous",
        "lengthInMeters": 21,
        "period": "Late Jurassic",
        "mya": [151],
        "info": "Apatosaurus had a long neck and an even longer whip-like tail, and likely browsed on low vegetation."
    },
    {
        "dinosaurId": "BFjjLjea-O",
        "name": "Brachiosaurus",
        "pronunciation": "BRACK-ee-oh-sore-us",
        "meaningOfName": "arm lizard",
        "diet": "herbivorous",
        "lengthInMeters": 30,
        "period": "Late Jurassic",
        "mya": [154, 150],
        "info": "Brachiosaurus had front legs longer than its hind legs, giving it a giraffe-like posture for reaching tall trees."
    },
    {
        "dinosaurId": "V53DvdhV2A",
        "name": "Stegosaurus",
        "pronunciation": "STEG-oh-sore-us",
        "meaningOfName": "roof lizard",
        "diet": "herbivorous",
        "lengthInMeters": 9,
        "period": "Late Jurassic",
        "mya": [150],
        "info": "Stegosaurus had two rows of large bony plates along its back and four spikes at the end of its tail."
    },
    {
        "dinosaurId": "Uw5a0gCPDr",
        "name": "Eoraptor",
        "pronunciation": "EE-oh-rap-tor",
        "meaningOfName": "dawn plunderer",
        "diet": "omnivorous",
        "lengthInMeters": 1,
        "period": "Late Triassic",
        "mya": [231],
        "info": "Eoraptor was a small, lightly built dinosaur and one of the earliest known."
    },
    {
        "dinosaurId": "U9vuZmgKwUr",
        "name": "Xenoceratops",
        "pronunciation": "ZEE-no-SEH-ruh-tops",
        "meaningOfName": "alien horned face",
        "diet": "herbivorous",
        "lengthInMeters": 6,
        "period": "Early Cretaceous",
        "mya": [77, 75],
        "info": "Xenoceratops had horns and a bony frill with elaborate ornamentation of projections, knobs, and spikes."
    },
    {
        "dinosaurId": "zp2AuVWosJ",
        "name": "Velociraptor",
        "pronunciation": "vel-OSS-ee-rap-tor",
        "meaningOfName": "swift seizer",
        "diet": "carnivorous",
        "lengthInMeters": 2,
        "period": "Late Cretaceous",
        "mya": [75, 71],
        "info": "Velociraptor was a feathered predator with a large, sickle-shaped claw on each foot."
    },
    {
        "dinosaurId": "8u9bXKstxN",
        "name": "Gallimimus",
        "pronunciation": "gal-ih-MEEM-us",
        "meaningOfName": "chicken mimic",
        "diet": "omnivorous",
        "lengthInMeters": 6,
        "period": "Late Cretaceous",
        "mya": [70],
        "info": "Gallimimus was a fast runner with a toothless beak and long hind limbs."
    },
    {
        "dinosaurId": "Q9tpAhhOXc",
        "name": "Tyrannosaurus",
        "pronunciation": "tie-RAN-oh-sore-us",
        "meaningOfName": "tyrant lizard",
        "diet": "carnivorous",
        "lengthInMeters": 12.3,
        "period": "Late Cretaceous",
        "mya": [68, 66],
        "info": "Tyrannosaurus had a massive skull balanced by a long, heavy tail and tiny two-fingered arms."
    },
    {
        "dinosaurId": "WHQcpcOj0G",
        "name": "Dracorex",
        "pronunciation": "dray-ko-REX",
        "meaningOfName": "dragon king",
        "diet": "herbivorous",
        "lengthInMeters": 3,
        "period": "Late Cretaceous",
        "mya": [66],
        "info": "Dracorex had a flat skull covered in spikes and bumps, giving it a dragon-like appearance."
    }
]
